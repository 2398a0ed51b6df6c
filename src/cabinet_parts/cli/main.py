"""Typer CLI for cabinet part generation."""

import typer

from cabinet_parts.cli.commands import generate, types_command, validate_command

app = typer.Typer(
    name="cabinet-parts",
    help="Generate positioned, dimensioned cabinet parts from a JSON configuration.",
)

app.command(name="generate")(generate)
app.command(name="validate")(validate_command)
app.command(name="types")(types_command)


if __name__ == "__main__":
    app()
