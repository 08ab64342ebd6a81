"""Domain layer - carpet pieces, results and pure calculations."""

from .services import (
    IdSequence,
    SplitResult,
    aggregate_same_lengths,
    augment_pieces,
    calculate_hardwood,
    find_layout_errors,
    move_needs_piece,
    recalculate,
    snap_position,
    split_by_roll_width,
    summarize_usage,
)
from .value_objects import (
    ROLL_WIDTH_INCHES,
    CarpetOptions,
    CarpetResult,
    HardwoodResult,
    Piece,
    PlacedPiece,
    format_dimensions,
    format_feet_inches,
)

__all__ = [
    "ROLL_WIDTH_INCHES",
    "CarpetOptions",
    "CarpetResult",
    "HardwoodResult",
    "IdSequence",
    "Piece",
    "PlacedPiece",
    "SplitResult",
    "aggregate_same_lengths",
    "augment_pieces",
    "calculate_hardwood",
    "find_layout_errors",
    "format_dimensions",
    "format_feet_inches",
    "move_needs_piece",
    "recalculate",
    "snap_position",
    "split_by_roll_width",
    "summarize_usage",
]
