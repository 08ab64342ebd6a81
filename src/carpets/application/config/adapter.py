"""Adapter to convert CarpetConfiguration into domain objects.

Bridges the Pydantic job schema to the frozen dataclasses used by the
calculator and packing layers.
"""

from carpets.application.config.loader import ConfigError
from carpets.application.config.schema import (
    AnnealingConfigSchema,
    CarpetConfiguration,
    PackingConfigSchema,
)
from carpets.domain import CarpetOptions, Piece
from carpets.infrastructure.measurement_parser import parse_bulk_measurements
from carpets.infrastructure.packing import AnnealingConfig, PackingConfig


def config_to_pieces(config: CarpetConfiguration) -> list[Piece]:
    """Convert configured rooms and bulk text to pieces.

    Rooms are numbered from 1 in file order; bulk entries continue the
    numbering. Unlike interactive bulk entry, a job file must be clean:
    any rejected bulk entry fails the whole load.

    Raises:
        ConfigError: With error_type "parse" if a bulk entry is malformed.
    """
    pieces = [
        Piece(
            id=i,
            width_feet=room.width_feet,
            width_inches=room.width_inches,
            length_feet=room.length_feet,
            length_inches=room.length_inches,
            label=room.label,
        )
        for i, room in enumerate(config.rooms, start=1)
    ]

    if config.bulk:
        parsed = parse_bulk_measurements(config.bulk, next_id=len(pieces) + 1)
        rejected = [entry for entry in parsed.entries if entry.error]
        if rejected:
            details = [{"entry": e.raw, "message": e.error} for e in rejected]
            lines = ["Bulk measurements could not be parsed:"]
            lines.extend(f"  - {d['entry']!r}: {d['message']}" for d in details)
            raise ConfigError(
                message="\n".join(lines),
                error_type="parse",
                details=details,
            )
        pieces.extend(parsed.valid)

    return pieces


def config_to_options(config: CarpetConfiguration) -> CarpetOptions:
    return CarpetOptions(
        add_slippage=config.options.add_slippage,
        steps=config.options.steps,
        slippage_inches=config.options.slippage_inches,
    )


def _annealing_to_domain(config: AnnealingConfigSchema, seed: int | None) -> AnnealingConfig:
    return AnnealingConfig(
        enabled=config.enabled,
        min_pieces=config.min_pieces,
        max_iterations=config.max_iterations,
        time_limit_ms=config.time_limit_ms,
        check_interval=config.check_interval,
        initial_temperature=config.initial_temperature,
        cooling_rate=config.cooling_rate,
        min_temperature=config.min_temperature,
        seed=seed if seed is not None else config.seed,
    )


def config_to_packing(
    config: CarpetConfiguration | PackingConfigSchema,
    seed: int | None = None,
) -> PackingConfig:
    """Convert packing tunables to the PackingConfig dataclass.

    Args:
        config: Full job configuration or just its packing section.
        seed: Overrides the configured annealing seed when given.

    Returns:
        PackingConfig domain dataclass.
    """
    packing = config.packing if isinstance(config, CarpetConfiguration) else config

    return PackingConfig(
        roll_width=packing.roll_width,
        loose_shelf_tolerance=packing.loose_shelf_tolerance,
        tight_shelf_tolerance=packing.tight_shelf_tolerance,
        length_group_tolerance=packing.length_group_tolerance,
        large_piece_threshold=packing.large_piece_threshold,
        gap_penalty_weight=packing.gap_penalty_weight,
        cluster_tolerance=packing.cluster_tolerance,
        long_piece_threshold=packing.long_piece_threshold,
        min_gap_size=packing.min_gap_size,
        annealing=_annealing_to_domain(packing.annealing, seed),
    )
