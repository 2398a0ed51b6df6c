"""Loading of JSON configuration files into validated schema models.

Every failure, whether reading the file, parsing JSON or validating the
schema, surfaces as a ``ConfigError`` whose ``error_type`` names the stage.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_parts.application.config.schemas import CabinetPartsConfiguration


class ConfigError(Exception):
    """A configuration that could not be loaded or used.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation or material_not_found.
        path: The config file, when loading from disk.
        details: Per-problem dicts; ``line``/``column``/``message`` for JSON
            errors, ``path``/``message``/``value``/``error_type`` otherwise.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render ``("materials", 1, "thickness")`` as ``materials[1].thickness``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _describe(detail: dict[str, Any]) -> str:
    value = detail["value"]
    if value is None or isinstance(value, (dict, list)):
        return f"  - {detail['path']}: {detail['message']}"
    return f"  - {detail['path']}: {detail['message']} (got: {value!r})"


def _validate(data: Any, path: Path | None = None) -> CabinetPartsConfiguration:
    try:
        return CabinetPartsConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {
                "path": _json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in e.errors()
        ]
        message = "\n".join(
            ["Configuration validation failed:"] + [_describe(d) for d in details]
        )
        raise ConfigError(message, "validation", path, details) from e


def _read(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e


def load_config(path: Path) -> CabinetPartsConfiguration:
    """Read, parse and validate a configuration file.

    Raises:
        ConfigError: If any stage fails; see ``ConfigError.error_type``.
    """
    content = _read(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CabinetPartsConfiguration:
    """Validate an already parsed configuration dictionary."""
    return _validate(data)
