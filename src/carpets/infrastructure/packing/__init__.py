"""Needs-piece packing: heuristics, selection and annealing refinement."""

from .annealing import RefinementResult, SimulatedAnnealingRefiner, greedy_replay
from .models import AnnealingConfig, HeightMap, PackingConfig, StrategyResult
from .selector import StrategySelector
from .strategies import (
    FirstFitByAreaStrategy,
    GapFillStrategy,
    LengthGroupingStrategy,
    ScoredPlacementStrategy,
    ShelfPackingStrategy,
    SmallPieceGroupingStrategy,
    default_strategies,
)

__all__ = [
    "AnnealingConfig",
    "FirstFitByAreaStrategy",
    "GapFillStrategy",
    "HeightMap",
    "LengthGroupingStrategy",
    "PackingConfig",
    "RefinementResult",
    "ScoredPlacementStrategy",
    "ShelfPackingStrategy",
    "SimulatedAnnealingRefiner",
    "SmallPieceGroupingStrategy",
    "StrategyResult",
    "StrategySelector",
    "default_strategies",
    "greedy_replay",
]
