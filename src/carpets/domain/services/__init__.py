"""Domain services for carpet roll planning.

This package provides the pure calculations around the packing search:
- Aggregation of same-length pieces and roll-width splitting
- Input augmentation (steps, slippage) and usage/waste synthesis
- Manual repositioning with edge snapping
- Hardwood box estimates
"""

from .adjustment import (
    DEFAULT_SNAP_THRESHOLD,
    find_layout_errors,
    move_needs_piece,
    snap_position,
)
from .aggregation import (
    IdSequence,
    SplitResult,
    aggregate_same_lengths,
    split_by_roll_width,
)
from .hardwood import calculate_hardwood
from .usage import (
    augment_pieces,
    needs_length_of,
    recalculate,
    summarize_usage,
    used_square_feet,
)

__all__ = [
    "DEFAULT_SNAP_THRESHOLD",
    "IdSequence",
    "SplitResult",
    "aggregate_same_lengths",
    "augment_pieces",
    "calculate_hardwood",
    "find_layout_errors",
    "move_needs_piece",
    "needs_length_of",
    "recalculate",
    "snap_position",
    "split_by_roll_width",
    "summarize_usage",
    "used_square_feet",
]
