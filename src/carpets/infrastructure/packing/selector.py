"""Strategy selection for needs-piece packing.

Runs every packing heuristic, keeps the shortest layout, and optionally
refines it with simulated annealing.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from carpets.contracts.strategies import PackingStrategy
from carpets.domain.value_objects import Piece

from .annealing import SimulatedAnnealingRefiner
from .models import PackingConfig, StrategyResult
from .strategies import default_strategies

logger = logging.getLogger(__name__)


class StrategySelector:
    """Coordinates the packing heuristics and the annealing refiner.

    Strategies are evaluated in order on the same input; the first one
    reaching the minimum length becomes the seed. When the needs list is
    large enough, the seed's processing order is annealed and the refined
    layout replaces the seed only when strictly shorter.

    Attributes:
        config: Packing configuration.
        strategies: Heuristics in evaluation order.
    """

    def __init__(
        self,
        config: PackingConfig | None = None,
        strategies: Sequence[PackingStrategy] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the selector.

        Args:
            config: Packing configuration. Defaults to PackingConfig().
            strategies: Heuristics to evaluate. Defaults to the seven
                built-in strategies.
            rng: Random source for the refiner. Defaults to one seeded
                from ``config.annealing.seed``.
        """
        self.config = config or PackingConfig()
        self.strategies = (
            list(strategies) if strategies is not None else default_strategies(self.config)
        )
        self._rng = rng

    def evaluate(self, pieces: Sequence[Piece]) -> list[StrategyResult]:
        """Run every strategy on the pieces, in order."""
        results = []
        for strategy in self.strategies:
            result = strategy.pack(pieces)
            logger.debug("Strategy %s reached %d", strategy.name, result.max_length)
            results.append(result)
        return results

    def select(self, pieces: Sequence[Piece]) -> StrategyResult:
        """Pick the shortest layout for the needs pieces.

        Args:
            pieces: Needs pieces, each narrower than the roll.

        Returns:
            The best StrategyResult; its ``name`` identifies the winning
            strategy or the refiner.
        """
        if not pieces:
            return StrategyResult.empty("none")

        best: StrategyResult | None = None
        for result in self.evaluate(pieces):
            if best is None or result.max_length < best.max_length:
                best = result
        assert best is not None

        annealing = self.config.annealing
        if annealing.enabled and len(pieces) >= annealing.min_pieces:
            refiner = SimulatedAnnealingRefiner(
                annealing, roll_width=self.config.roll_width, rng=self._rng
            )
            refinement = refiner.refine(best)
            if refinement.result.max_length < best.max_length:
                best = refinement.result

        logger.info(
            "Selected %s for %d needs pieces (length %d)",
            best.name,
            len(pieces),
            best.max_length,
        )
        return best
