"""Typer CLI for carpet roll planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from carpets.application import CarpetCalculator
from carpets.application.config import (
    ConfigError,
    config_to_options,
    config_to_packing,
    config_to_pieces,
    load_config,
)
from carpets.cli.commands import validate_command
from carpets.domain import CarpetOptions, Piece, calculate_hardwood
from carpets.infrastructure import (
    BulkParseFormatter,
    CarpetReportFormatter,
    HardwoodReportFormatter,
    JsonExporter,
    PackingConfig,
    RollDiagramFormatter,
    parse_bulk_measurements,
)
from carpets.infrastructure.packing import AnnealingConfig

OUTPUT_FORMATS = ("text", "diagram", "json")

app = typer.Typer(
    name="carpets",
    help="Plan carpet cuts from a 12ft roll and estimate hardwood boxes.",
)

app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_rooms(text: str, next_id: int = 1) -> list[Piece]:
    """Parse --rooms text, reporting rejected entries on stderr."""
    parsed = parse_bulk_measurements(text, next_id=next_id)
    for entry in parsed.entries:
        if entry.error:
            typer.echo(f"Skipping {entry.raw!r}: {entry.error}", err=True)
        elif entry.warning:
            typer.echo(f"Warning {entry.raw!r}: {entry.warning}", err=True)
    return list(parsed.valid)


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    rooms: Annotated[
        str | None,
        typer.Option("--rooms", "-r", help="Room measurements, e.g. 'LR 11.6x13.6, BR 10.3x12'"),
    ] = None,
    steps: Annotated[
        int | None,
        typer.Option("--steps", help="Number of 4'x2' stair pieces to add"),
    ] = None,
    slippage: Annotated[
        bool | None,
        typer.Option("--slippage/--no-slippage", help="Add a 4in cutting buffer to every piece"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for reproducible annealing"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, diagram, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing progress"),
    ] = False,
) -> None:
    """Calculate the roll length and waste for a set of rooms.

    Rooms come from a job file, from --rooms, or both (--rooms entries are
    appended after the file's rooms). CLI options override file options.

    Examples:
        carpets calculate --rooms "LR 11.6x13.6, BR 10.3x12" --steps 13
        carpets calculate --config house.json --format diagram
        carpets calculate --config house.json --seed 42 --format json -o plan.json
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    pieces: list[Piece] = []
    options = CarpetOptions()
    packing = PackingConfig(annealing=AnnealingConfig(seed=seed))

    if config_file is not None:
        try:
            config = load_config(config_file)
            pieces = config_to_pieces(config)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        options = config_to_options(config)
        packing = config_to_packing(config, seed=seed)
    elif rooms is None:
        typer.echo("Error: provide --config or --rooms", err=True)
        raise typer.Exit(code=1)

    if rooms is not None:
        pieces.extend(_parse_rooms(rooms, next_id=len(pieces) + 1))
    if not pieces:
        typer.echo("Error: no valid room measurements", err=True)
        raise typer.Exit(code=1)

    try:
        options = CarpetOptions(
            add_slippage=options.add_slippage if slippage is None else slippage,
            steps=options.steps if steps is None else steps,
            slippage_inches=options.slippage_inches,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = CarpetCalculator(packing).calculate(pieces, options)

    if output_format == "json":
        output = JsonExporter().export(result)
    elif output_format == "diagram":
        output = (
            CarpetReportFormatter().format(result)
            + "\n\n"
            + RollDiagramFormatter().format(result)
        )
    else:
        output = CarpetReportFormatter().format(result)

    if output_file is not None:
        output_file.write_text(output + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output_format} output to {output_file}")
    else:
        typer.echo(output)


@app.command()
def parse(
    text: Annotated[str, typer.Argument(help="Measurements to preview")],
) -> None:
    """Preview how free-text measurements will be read.

    Exits with code 1 when no entry is usable.

    Example:
        carpets parse "LR 11.6x13.6, BR 10.3*12, Hall 5'6\\" x 8'"
    """
    result = parse_bulk_measurements(text)
    typer.echo(BulkParseFormatter().format(result))
    if result.valid_count == 0:
        raise typer.Exit(code=1)


@app.command()
def hardwood(
    rooms: Annotated[
        str,
        typer.Option("--rooms", "-r", help="Room measurements, e.g. 'LR 11.6x13.6'"),
    ],
    waste_percent: Annotated[
        float,
        typer.Option("--waste-percent", help="Waste allowance in percent"),
    ] = 7.0,
    box_sq_ft: Annotated[
        float,
        typer.Option("--box-sqft", help="Coverage of one box in square feet"),
    ] = 25.0,
) -> None:
    """Estimate hardwood boxes for a set of rooms."""
    pieces = _parse_rooms(rooms)
    if not pieces:
        typer.echo("Error: no valid room measurements", err=True)
        raise typer.Exit(code=1)

    try:
        result = calculate_hardwood(pieces, waste_percent=waste_percent, box_sq_ft=box_sq_ft)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(HardwoodReportFormatter().format(result))


if __name__ == "__main__":
    app()
