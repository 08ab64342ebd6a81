"""Manual repositioning of needs pieces.

Supports an interactive diagram where the installer drags pieces around:
positions are clamped to the roll, snapped to nearby edges, and the
result totals are recalculated without rerunning the optimizer.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..value_objects import ROLL_WIDTH_INCHES, CarpetResult, PlacedPiece
from .usage import recalculate

logger = logging.getLogger(__name__)

DEFAULT_SNAP_THRESHOLD = 5


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _closest_snap(
    start: int, size: int, edges: Sequence[int], threshold: int
) -> int | None:
    """Find the closest edge either side of ``[start, start + size]`` can snap to.

    Returns:
        The snapped start position, or None if no edge is within threshold.
    """
    best: tuple[int, int] | None = None  # (distance, new start)
    for edge in edges:
        near_dist = abs(start - edge)
        if near_dist < threshold and (best is None or near_dist < best[0]):
            best = (near_dist, edge)
        far_dist = abs(start + size - edge)
        if far_dist < threshold and (best is None or far_dist < best[0]):
            best = (far_dist, edge - size)
    return None if best is None else best[1]


def snap_position(
    placed: PlacedPiece,
    x: int,
    y: int,
    others: Sequence[PlacedPiece],
    roll_width: int = ROLL_WIDTH_INCHES,
    threshold: int = DEFAULT_SNAP_THRESHOLD,
) -> tuple[int, int]:
    """Clamp a requested position to the roll and snap it to nearby edges.

    X snaps to the roll edges and the left/right edges of other pieces;
    Y snaps to the start of the roll and the top/bottom edges of other
    pieces. Either side of the moved piece may snap; only the closest
    edge within ``threshold`` inches wins.

    Args:
        placed: The piece being moved.
        x: Requested x position.
        y: Requested y position.
        others: The other needs pieces.
        roll_width: Width of the roll in inches.
        threshold: Snap distance in inches (exclusive).

    Returns:
        Tuple of (x, y) for the final position.
    """
    max_x = max(roll_width - placed.width, 0)
    x = _clamp(x, 0, max_x)
    y = max(0, y)

    x_edges = [0, roll_width]
    y_edges = [0]
    for other in others:
        x_edges.extend((other.x, other.right_edge))
        y_edges.extend((other.y, other.top_edge))

    snapped_x = _closest_snap(x, placed.width, x_edges, threshold)
    if snapped_x is not None:
        x = snapped_x
    snapped_y = _closest_snap(y, placed.length, y_edges, threshold)
    if snapped_y is not None:
        y = snapped_y

    return _clamp(x, 0, max_x), max(0, y)


def find_layout_errors(
    placements: Sequence[PlacedPiece],
    roll_width: int = ROLL_WIDTH_INCHES,
) -> list[str]:
    """List placements that leave the roll or overlap each other.

    Args:
        placements: Needs placements to check.
        roll_width: Width of the roll in inches.

    Returns:
        Human-readable problems; empty when the layout is valid.
    """
    errors: list[str] = []
    for placed in placements:
        if placed.right_edge > roll_width:
            errors.append(
                f"Piece {placed.id} extends past the roll edge "
                f"({placed.right_edge} > {roll_width})"
            )
    for i, first in enumerate(placements):
        for second in placements[i + 1 :]:
            if first.overlaps(second):
                errors.append(f"Pieces {first.id} and {second.id} overlap")
    return errors


def move_needs_piece(
    result: CarpetResult,
    piece_id: int,
    x: int,
    y: int,
    snap: bool = True,
    threshold: int = DEFAULT_SNAP_THRESHOLD,
) -> CarpetResult:
    """Move one needs piece and recalculate the result totals.

    Args:
        result: Current calculation result.
        piece_id: Id of the needs piece to move.
        x: Requested x position.
        y: Requested y position.
        snap: Whether to snap to nearby edges (clamping always applies).
        threshold: Snap distance in inches.

    Returns:
        A new CarpetResult with the piece moved and totals recalculated.

    Raises:
        KeyError: If no needs piece has ``piece_id``.
    """
    index = next(
        (i for i, placed in enumerate(result.needs) if placed.id == piece_id), None
    )
    if index is None:
        raise KeyError(piece_id)

    target = result.needs[index]
    others = result.needs[:index] + result.needs[index + 1 :]

    if snap:
        x, y = snap_position(target, x, y, others, result.roll_width, threshold)
    else:
        x = _clamp(x, 0, max(result.roll_width - target.width, 0))
        y = max(0, y)

    needs = list(result.needs)
    needs[index] = target.moved_to(x, y)

    errors = find_layout_errors(needs, result.roll_width)
    if errors:
        logger.warning("Manual move left %d layout problem(s): %s", len(errors), errors)

    return recalculate(result, needs)
