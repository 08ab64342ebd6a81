"""Application services for carpet roll planning."""

from .carpet_calculator import CarpetCalculator, RollPlan

__all__ = [
    "CarpetCalculator",
    "RollPlan",
]
