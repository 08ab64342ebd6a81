"""Simulated-annealing refinement of a packing order.

The state is the order in which needs pieces are fed to a deterministic
greedy placer (lowest available position, no rotation). A neighbour swaps
two pieces in the order; worse neighbours are accepted with probability
``exp(-delta / temperature)`` so the search can leave local minima.
"""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from carpets.domain.value_objects import ROLL_WIDTH_INCHES, Piece

from .models import AnnealingConfig, HeightMap, StrategyResult

logger = logging.getLogger(__name__)

REFINER_NAME = "simulated_annealing"


@dataclass(frozen=True)
class RefinementResult:
    """Outcome of one refinement run.

    Attributes:
        result: Best placement seen (the seed itself when nothing improved).
        iterations: Swap iterations performed.
        accepted: Number of accepted moves.
        improved: Whether the result is strictly shorter than the seed.
        elapsed_ms: Wall-clock time spent.
    """

    result: StrategyResult
    iterations: int
    accepted: int
    improved: bool
    elapsed_ms: float


def greedy_replay(
    order: Sequence[Piece], roll_width: int, name: str = REFINER_NAME
) -> StrategyResult:
    """Place pieces in the given order, each at the lowest available position."""
    height_map = HeightMap(roll_width)
    placements = tuple(height_map.place_lowest(piece) for piece in order)
    return StrategyResult(name=name, placements=placements, max_length=height_map.max_height)


class SimulatedAnnealingRefiner:
    """Refine a seed placement by annealing over its processing order.

    Args:
        config: Annealing parameters.
        roll_width: Roll width in inches.
        rng: Random source. Defaults to ``random.Random(config.seed)``.
        clock: Monotonic clock returning seconds.
    """

    def __init__(
        self,
        config: AnnealingConfig | None = None,
        roll_width: int = ROLL_WIDTH_INCHES,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.config = config or AnnealingConfig()
        self.roll_width = roll_width
        self.rng = rng or random.Random(self.config.seed)
        self.clock = clock

    def refine(self, seed: StrategyResult) -> RefinementResult:
        """Search for a shorter placement starting from the seed's order.

        The best-ever placement is tracked from the seed geometry, so the
        returned result is never longer than the seed.

        Args:
            seed: Best heuristic placement.

        Returns:
            RefinementResult wrapping the best placement found.
        """
        config = self.config
        started = self.clock()
        order = list(seed.order)

        if len(order) < 2:
            return RefinementResult(
                result=seed, iterations=0, accepted=0, improved=False, elapsed_ms=0.0
            )

        current = greedy_replay(order, self.roll_width)
        best = current if current.max_length < seed.max_length else seed
        temperature = config.initial_temperature
        iterations = 0
        accepted = 0

        while iterations < config.max_iterations:
            if iterations and iterations % config.check_interval == 0:
                elapsed_ms = (self.clock() - started) * 1000
                if elapsed_ms >= config.time_limit_ms:
                    logger.debug(
                        "Annealing stopped on time limit after %d iterations (%.0fms)",
                        iterations,
                        elapsed_ms,
                    )
                    break

            i, j = self.rng.sample(range(len(order)), 2)
            candidate_order = list(order)
            candidate_order[i], candidate_order[j] = candidate_order[j], candidate_order[i]
            candidate = greedy_replay(candidate_order, self.roll_width)

            delta = candidate.max_length - current.max_length
            if delta < 0 or self.rng.random() < math.exp(-delta / temperature):
                order, current = candidate_order, candidate
                accepted += 1
                if current.max_length < best.max_length:
                    best = current
                    logger.debug(
                        "Annealing improved to %d at iteration %d",
                        best.max_length,
                        iterations,
                    )

            temperature = max(temperature * config.cooling_rate, config.min_temperature)
            iterations += 1

        elapsed_ms = (self.clock() - started) * 1000
        improved = best.max_length < seed.max_length
        logger.info(
            "Annealing ran %d iterations (%d accepted) in %.0fms: %d -> %d",
            iterations,
            accepted,
            elapsed_ms,
            seed.max_length,
            best.max_length,
        )
        return RefinementResult(
            result=best,
            iterations=iterations,
            accepted=accepted,
            improved=improved,
            elapsed_ms=elapsed_ms,
        )
