"""CLI command implementations for the carpets application.

This package contains subcommands for the carpets CLI, including:
- validate: Validate a job file
"""

from carpets.cli.commands.validate import validate_command

__all__ = ["validate_command"]
