"""Generate command for the cabinet-parts CLI.

Loads a configuration file, validates it, generates the parts of the
cabinet and writes them in the requested format.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_parts.application import GeneratePartsCommand, GenerationOutput
from cabinet_parts.application.config import (
    ConfigError,
    config_to_request,
    load_config,
    validate_config,
)
from cabinet_parts.infrastructure import (
    CsvCutListExporter,
    JsonExporter,
    PartListFormatter,
)

from .validate import display_load_error, display_validation_result

__all__ = ["OUTPUT_FORMATS", "generate"]

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "csv", "table")


def _render(output: GenerationOutput, output_format: str) -> str:
    if output_format == "json":
        return JsonExporter().export(output)
    if output_format == "csv":
        return CsvCutListExporter().export(output)
    return PartListFormatter().format(output)


def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: json, csv, table"),
    ] = "table",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate the parts of a cabinet from a configuration file.

    Example:
        cabinet-parts generate kitchen.json --format csv -o kitchen.csv
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    validation = validate_config(config)
    if not validation.is_valid:
        display_validation_result(validation)
        raise typer.Exit(code=1)
    for warning in validation.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    try:
        request = config_to_request(config)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = GeneratePartsCommand().execute(request)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    rendered = _render(result, output_format)
    if output_file is not None:
        output_file.write_text(rendered, encoding="utf-8")
        logger.debug(f"Wrote {result.part_count} parts to {output_file}")
        typer.echo(f"Wrote {result.part_count} parts to {output_file}")
    else:
        typer.echo(rendered)
