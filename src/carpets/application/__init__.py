"""Application layer - use cases and orchestration."""

from .dtos import CarpetInput, CarpetInputError, RoomInput
from .services import CarpetCalculator, RollPlan

__all__ = [
    "CarpetCalculator",
    "CarpetInput",
    "CarpetInputError",
    "RollPlan",
    "RoomInput",
]
