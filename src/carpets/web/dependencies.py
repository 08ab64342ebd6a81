"""FastAPI dependency injection for carpet services."""

from typing import Annotated, Callable

from fastapi import Depends

from carpets.application import CarpetCalculator
from carpets.infrastructure.packing import PackingConfig

CalculatorFactory = Callable[[PackingConfig], CarpetCalculator]


def get_calculator_factory() -> CalculatorFactory:
    """Dependency returning a factory for configured calculators.

    Packing tunables arrive with each request, so endpoints receive a
    factory rather than a shared calculator instance.
    """
    return CarpetCalculator


# Type aliases for cleaner endpoint signatures
CalculatorFactoryDep = Annotated[CalculatorFactory, Depends(get_calculator_factory)]
