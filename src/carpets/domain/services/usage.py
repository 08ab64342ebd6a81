"""Input augmentation and roll usage synthesis.

The synthesis functions here are independent of the packing search so a
caller that edits piece positions by hand can re-derive every total
without running the optimizer again.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..value_objects import (
    ROLL_WIDTH_INCHES,
    SQ_FEET_PER_SQ_YARD,
    SQ_INCHES_PER_SQ_FOOT,
    STEP_LENGTH_INCHES,
    STEP_WIDTH_INCHES,
    CarpetOptions,
    CarpetResult,
    Piece,
    PlacedPiece,
)

logger = logging.getLogger(__name__)

STEP_ID_START = 9000


def augment_pieces(
    pieces: Sequence[Piece],
    options: CarpetOptions,
) -> tuple[list[Piece], list[Piece]]:
    """Add stair pieces and apply the slippage buffer.

    Args:
        pieces: Requested pieces.
        options: Augmentation options.

    Returns:
        Tuple of (used, packing):
        - used: requested pieces plus stair pieces, before slippage.
          Their area is what the customer actually needs.
        - packing: the same pieces after slippage, which is what gets
          laid out on the roll.
    """
    used = list(pieces)
    for i in range(options.steps):
        used.append(
            Piece.from_inches(
                STEP_ID_START + i, STEP_WIDTH_INCHES, STEP_LENGTH_INCHES, "Step"
            )
        )

    if options.add_slippage and options.slippage_inches:
        packing = [piece.expanded(options.slippage_inches) for piece in used]
    else:
        packing = list(used)

    return used, packing


def used_square_feet(pieces: Sequence[Piece]) -> float:
    """Total area of the pieces in square feet."""
    return sum(piece.area for piece in pieces) / SQ_INCHES_PER_SQ_FOOT


def needs_length_of(needs: Sequence[PlacedPiece]) -> int:
    """Roll length reached by the furthest needs piece."""
    return max((placed.top_edge for placed in needs), default=0)


def summarize_usage(
    standard: Sequence[Piece],
    needs: Sequence[PlacedPiece],
    standard_length: int,
    needs_length: int,
    used_sq_ft: float,
    is_flipped: bool = False,
    strategy: str = "",
    roll_width: int = ROLL_WIDTH_INCHES,
) -> CarpetResult:
    """Derive area and waste totals for a chosen layout.

    Args:
        standard: Full-width pieces.
        needs: Placed narrower pieces.
        standard_length: Length consumed by standard pieces.
        needs_length: Length consumed by needs pieces.
        used_sq_ft: Area of the requested pieces.
        is_flipped: Whether the layout is rotated 90 degrees.
        strategy: Name of the packing candidate that placed ``needs``.
        roll_width: Width of the roll in inches.

    Returns:
        CarpetResult with all derived fields filled in.
    """
    total_length = standard_length + needs_length
    total_sq_ft = roll_width * total_length / SQ_INCHES_PER_SQ_FOOT
    waste_sq_ft = total_sq_ft - used_sq_ft
    waste_percent = waste_sq_ft / total_sq_ft * 100 if total_sq_ft > 0 else 0.0

    return CarpetResult(
        standard=tuple(standard),
        needs=tuple(needs),
        standard_length=standard_length,
        needs_length=needs_length,
        total_length=total_length,
        total_sq_ft=total_sq_ft,
        total_sq_yd=total_sq_ft / SQ_FEET_PER_SQ_YARD,
        used_sq_ft=used_sq_ft,
        waste_sq_ft=waste_sq_ft,
        waste_percent=waste_percent,
        is_flipped=is_flipped,
        strategy=strategy,
        roll_width=roll_width,
    )


def recalculate(
    result: CarpetResult,
    needs: Sequence[PlacedPiece] | None = None,
) -> CarpetResult:
    """Re-derive totals after the needs geometry was edited.

    ``needs_length`` is recomputed as the furthest ``y + length`` over the
    needs pieces; standard pieces and the used area are carried over.

    Args:
        result: The result being edited.
        needs: Edited needs placements. Defaults to ``result.needs``.

    Returns:
        A new CarpetResult consistent with the edited geometry.
    """
    if needs is None:
        needs = result.needs

    updated = summarize_usage(
        standard=result.standard,
        needs=needs,
        standard_length=result.standard_length,
        needs_length=needs_length_of(needs),
        used_sq_ft=result.used_sq_ft,
        is_flipped=result.is_flipped,
        strategy=result.strategy,
        roll_width=result.roll_width,
    )
    if updated.needs_length != result.needs_length:
        logger.debug(
            "Needs length changed from %d to %d after edit",
            result.needs_length,
            updated.needs_length,
        )
    return updated
