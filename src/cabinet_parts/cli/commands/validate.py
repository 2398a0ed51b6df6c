"""The ``validate`` command and the error report shared with ``generate``."""

from pathlib import Path
from typing import Annotated, Any

import typer

from cabinet_parts.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a cabinet configuration file.

    Exits with 0 when the file is clean, 1 when it has errors and 2 when it
    only has warnings.
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _echo_issue(path: str, message: str, value: Any = None, err: bool = True) -> None:
    typer.echo(f"  {path}: {message}", err=err)
    if value is not None:
        typer.echo(f"    Value: {value!r}", err=err)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"  File not found: {error.path}"]
    if error.error_type == "json_parse":
        return ["  Invalid JSON syntax"] + [
            f"    Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', 'Unknown error')}"
            for d in error.details
        ]
    return [f"  {error.message}"]


def display_load_error(error: ConfigError) -> None:
    """Print a file, JSON or schema error raised while loading a config."""
    typer.echo("Errors:", err=True)
    if error.error_type in ("validation", "material_not_found"):
        for detail in error.details:
            _echo_issue(
                detail.get("path", "unknown"),
                detail.get("message", "Unknown error"),
                detail.get("value"),
            )
    else:
        for line in _load_error_lines(error):
            typer.echo(line, err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def display_validation_result(result: ValidationResult) -> None:
    errors, warnings = result.errors, result.warnings

    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            _echo_issue(error.path, error.message, error.value)
        typer.echo()

    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            _echo_issue(warning.path, warning.message, err=False)
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if errors:
        typer.echo(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)",
            err=True,
        )
    elif warnings:
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
