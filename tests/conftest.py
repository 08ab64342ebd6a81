"""Pytest configuration and shared fixtures for carpet tests."""

from __future__ import annotations

import random

import pytest

from carpets.domain import Piece
from carpets.infrastructure.packing import AnnealingConfig, PackingConfig


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================

# Installer measurements as (width ft, width in, length ft, length in)
HOUSE_MEASUREMENTS = [
    (12, 6, 8, 3),
    (14, 4, 13, 6),
    (5, 0, 9, 6),
    (25, 3, 3, 5),
    (7, 3, 3, 9),
    (2, 4, 2, 7),
    (5, 4, 3, 3),
    (6, 1, 3, 9),
    (15, 6, 20, 1),
]


@pytest.fixture
def house_pieces() -> list[Piece]:
    """A realistic house worth of room measurements."""
    return [
        Piece(id=i, width_feet=wf, width_inches=wi, length_feet=lf, length_inches=li)
        for i, (wf, wi, lf, li) in enumerate(HOUSE_MEASUREMENTS, start=1)
    ]


@pytest.fixture
def fast_config() -> PackingConfig:
    """Packing configuration with a short, seeded annealing run."""
    return PackingConfig(annealing=AnnealingConfig(max_iterations=150, seed=42))


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)
