"""List the cabinet types and corner models the engine can generate."""

import typer

from cabinet_parts.domain import cabinet_generator_registry
from cabinet_parts.domain.assemblers.corner import list_corner_strategies

__all__ = ["types_command"]


def types_command() -> None:
    """List the registered cabinet types and corner cabinet models."""
    typer.echo("Cabinet types:")
    for cabinet_type in cabinet_generator_registry.list():
        typer.echo(f"  {cabinet_type.value}")
    typer.echo()
    typer.echo("Corner cabinet models:")
    for corner_type in list_corner_strategies():
        typer.echo(f"  {corner_type.value}")
