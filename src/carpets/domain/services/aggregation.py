"""Aggregation and roll-width splitting of carpet pieces.

Pieces that share a length can be cut side by side from one band across
the roll, so they are merged into a single wide piece first. The merged
pieces are then split into full roll-width "standard" cuts plus at most
one narrower remainder ("needs") per length.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..value_objects import ROLL_WIDTH_INCHES, Piece

logger = logging.getLogger(__name__)


class IdSequence:
    """Mutable id counter shared by the stages of one calculation."""

    def __init__(self, start: int = 1000) -> None:
        self._value = start

    @property
    def value(self) -> int:
        """The id the next call to :meth:`next` will return."""
        return self._value

    def next(self) -> int:
        value = self._value
        self._value += 1
        return value


@dataclass(frozen=True)
class SplitResult:
    """Pieces separated by whether they need cross-width packing.

    Attributes:
        standard: Pieces exactly one roll width wide.
        needs: Remainder pieces narrower than the roll.
    """

    standard: tuple[Piece, ...]
    needs: tuple[Piece, ...]

    @property
    def standard_length(self) -> int:
        """Roll length consumed by standard pieces laid end to end."""
        return sum(piece.length_total for piece in self.standard)


def aggregate_same_lengths(
    pieces: Sequence[Piece],
    ids: IdSequence,
) -> list[Piece]:
    """Merge pieces sharing a length into one piece per length.

    The merged piece's width is the sum of the member widths, so total
    width per length (and therefore area) is preserved exactly.

    Args:
        pieces: Pieces to merge.
        ids: Counter used to mint ids for the merged pieces.

    Returns:
        One new piece per distinct length, in first-seen order.
    """
    widths_by_length: dict[int, int] = {}
    for piece in pieces:
        length = piece.length_total
        widths_by_length[length] = widths_by_length.get(length, 0) + piece.width_total

    aggregated = [
        Piece.from_inches(ids.next(), width, length)
        for length, width in widths_by_length.items()
    ]

    logger.debug(
        "Aggregated %d pieces into %d length groups", len(pieces), len(aggregated)
    )
    return aggregated


def split_by_roll_width(
    pieces: Sequence[Piece],
    ids: IdSequence,
    roll_width: int = ROLL_WIDTH_INCHES,
) -> SplitResult:
    """Split pieces into full-width standard cuts and narrower remainders.

    Whole multiples of the roll width are peeled off each piece as
    standard pieces. A remainder exactly one roll wide is also standard;
    a non-zero narrower remainder goes to needs.

    Args:
        pieces: Aggregated pieces to split.
        ids: Counter used to mint ids for the emitted pieces.
        roll_width: Width of the roll in inches.

    Returns:
        SplitResult with standard and needs pieces.
    """
    standard: list[Piece] = []
    needs: list[Piece] = []

    for piece in pieces:
        remaining = piece.width_total

        while remaining > roll_width:
            standard.append(
                Piece.from_inches(ids.next(), roll_width, piece.length_total)
            )
            remaining -= roll_width

        if remaining == roll_width:
            standard.append(Piece.from_inches(ids.next(), remaining, piece.length_total))
        elif remaining > 0:
            needs.append(Piece.from_inches(ids.next(), remaining, piece.length_total))

    logger.debug(
        "Split into %d standard and %d needs pieces", len(standard), len(needs)
    )
    return SplitResult(standard=tuple(standard), needs=tuple(needs))
