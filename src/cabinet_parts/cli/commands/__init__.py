"""CLI command implementations for the cabinet-parts application.

This package contains subcommands for the cabinet-parts CLI, including:
- generate: Generate the parts of a cabinet from a configuration file
- validate: Validate a configuration file
- types: List the supported cabinet types
"""

from cabinet_parts.cli.commands.generate import generate
from cabinet_parts.cli.commands.types import types_command
from cabinet_parts.cli.commands.validate import validate_command

__all__ = ["generate", "types_command", "validate_command"]
