"""Validate command for checking carpet job files.

Loads a JSON job file, reports schema and bulk-entry errors, and lists
warnings for entries that parsed but look suspicious.
"""

from pathlib import Path
from typing import Annotated

import typer

from carpets.application.config import (
    ConfigError,
    config_to_pieces,
    load_config,
)
from carpets.infrastructure.measurement_parser import parse_bulk_measurements


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "(job)"
            typer.echo(f"  {path}: {detail.get('message', 'Unknown error')}", err=True)
    elif error.error_type == "parse":
        for detail in error.details:
            typer.echo(f"  bulk {detail['entry']!r}: {detail['message']}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a carpet job file.

    Exit codes:
        0 - Job file is valid with no warnings
        1 - Job file has errors (cannot be used)
        2 - Job file is valid but has warnings

    Example:
        carpets validate house.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
        pieces = config_to_pieces(config)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    warnings: list[str] = []
    if config.bulk:
        parsed = parse_bulk_measurements(config.bulk)
        warnings = [f"bulk {e.raw!r}: {e.warning}" for e in parsed.entries if e.warning]

    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo(f"Validation passed. {len(pieces)} room(s) ready.")
