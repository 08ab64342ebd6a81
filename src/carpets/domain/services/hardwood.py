"""Hardwood flooring estimate: room area plus a fixed waste allowance."""

from __future__ import annotations

import math
from typing import Sequence

from ..value_objects import HardwoodResult, Piece
from .usage import used_square_feet

DEFAULT_WASTE_PERCENT = 7.0
DEFAULT_BOX_SQ_FT = 25.0


def calculate_hardwood(
    pieces: Sequence[Piece],
    waste_percent: float = DEFAULT_WASTE_PERCENT,
    box_sq_ft: float = DEFAULT_BOX_SQ_FT,
) -> HardwoodResult:
    """Estimate hardwood boxes needed for the given rooms.

    Args:
        pieces: Room measurements.
        waste_percent: Waste allowance as a percentage of room area.
        box_sq_ft: Coverage of one box in square feet.

    Returns:
        HardwoodResult with area, waste and box count.

    Raises:
        ValueError: If box coverage is not positive or waste is negative.
    """
    if box_sq_ft <= 0:
        raise ValueError("Box coverage must be positive")
    if waste_percent < 0:
        raise ValueError("Waste percentage must be non-negative")

    total_sq_ft = used_square_feet(pieces)
    waste_sq_ft = total_sq_ft * waste_percent / 100
    total_needed = total_sq_ft + waste_sq_ft

    return HardwoodResult(
        total_sq_ft=total_sq_ft,
        waste_sq_ft=waste_sq_ft,
        total_needed=total_needed,
        boxes_needed=math.ceil(total_needed / box_sq_ft),
        waste_percent=waste_percent,
        box_sq_ft=box_sq_ft,
    )
