"""Carpet roll calculation service.

Runs the full pipeline for one orientation (aggregate, split, pack) and
compares the job as given against the job rotated 90 degrees, keeping
whichever consumes less roll.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from carpets.domain import (
    CarpetOptions,
    CarpetResult,
    IdSequence,
    Piece,
    PlacedPiece,
    aggregate_same_lengths,
    augment_pieces,
    split_by_roll_width,
    summarize_usage,
)
from carpets.domain.services import used_square_feet
from carpets.infrastructure.packing import PackingConfig, StrategySelector

from ..dtos import CarpetInput, CarpetInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollPlan:
    """Layout for one orientation.

    Attributes:
        standard: Full-width pieces, stacked end to end.
        needs: Packed narrower pieces.
        standard_length: Length consumed by standard pieces.
        needs_length: Length consumed by the needs layout.
        strategy: Packing candidate that produced ``needs``.
    """

    standard: tuple[Piece, ...]
    needs: tuple[PlacedPiece, ...]
    standard_length: int
    needs_length: int
    strategy: str

    @property
    def total_length(self) -> int:
        return self.standard_length + self.needs_length


class CarpetCalculator:
    """Computes how to cut a set of rooms from a single carpet roll.

    Example:
        >>> calculator = CarpetCalculator()
        >>> result = calculator.calculate([Piece(1, 10, 0, 10, 0)])
        >>> result.total_length
        120
    """

    def __init__(
        self,
        config: PackingConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the calculator.

        Args:
            config: Packing configuration. Defaults to PackingConfig().
            rng: Random source for annealing. Defaults to one seeded from
                ``config.annealing.seed``.
        """
        self.config = config or PackingConfig()
        self.selector = StrategySelector(self.config, rng=rng)

    @property
    def roll_width(self) -> int:
        return self.config.roll_width

    def plan(self, pieces: Sequence[Piece]) -> RollPlan:
        """Lay out the pieces in their given orientation.

        Args:
            pieces: Pieces to cut, already augmented.

        Returns:
            RollPlan for this orientation.
        """
        ids = IdSequence()
        aggregated = aggregate_same_lengths(pieces, ids)
        split = split_by_roll_width(aggregated, ids, self.roll_width)
        packed = self.selector.select(split.needs)

        return RollPlan(
            standard=tuple(split.standard),
            needs=packed.placements,
            standard_length=split.standard_length,
            needs_length=packed.max_length,
            strategy=packed.name,
        )

    def calculate(
        self,
        pieces: Sequence[Piece],
        options: CarpetOptions | None = None,
    ) -> CarpetResult:
        """Plan the roll for the pieces and derive area totals.

        Both orientations are planned; the rotated one is used only when
        its total length is strictly shorter.

        Args:
            pieces: Requested room pieces.
            options: Steps and slippage options.

        Returns:
            CarpetResult for the chosen orientation. Empty input gives an
            all-zero result.
        """
        options = options or CarpetOptions()
        used, packing = augment_pieces(pieces, options)
        if not packing:
            return summarize_usage((), (), 0, 0, 0.0, roll_width=self.roll_width)

        normal = self.plan(packing)
        flipped = self.plan([piece.transposed() for piece in packing])
        is_flipped = flipped.total_length < normal.total_length
        chosen = flipped if is_flipped else normal

        logger.info(
            "Roll length %d as given, %d rotated; using %s orientation (%s)",
            normal.total_length,
            flipped.total_length,
            "rotated" if is_flipped else "original",
            chosen.strategy,
        )

        return summarize_usage(
            standard=chosen.standard,
            needs=chosen.needs,
            standard_length=chosen.standard_length,
            needs_length=chosen.needs_length,
            used_sq_ft=used_square_feet(used),
            is_flipped=is_flipped,
            strategy=chosen.strategy,
            roll_width=self.roll_width,
        )

    def calculate_input(self, data: CarpetInput) -> CarpetResult:
        """Validate a CarpetInput DTO and calculate it.

        Raises:
            CarpetInputError: If the input fails validation.
        """
        errors = data.validate()
        if errors:
            raise CarpetInputError(errors)
        return self.calculate(data.to_pieces(), data.to_options())
