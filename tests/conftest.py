"""Pytest configuration and shared fixtures for cutting board tests."""

from __future__ import annotations

import random

import pytest

from cuttingboards.domain import WoodStockPiece


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared stock fixtures
# =============================================================================


@pytest.fixture
def maple_stock() -> list[WoodStockPiece]:
    """Ten 3/4" x 2" x 24" maple boards."""
    return [WoodStockPiece("Maple", thickness=0.75, width=2.0, length=24.0, quantity=10)]


@pytest.fixture
def two_tone_stock() -> list[WoodStockPiece]:
    """Five maple and five walnut boards of the same section."""
    return [
        WoodStockPiece("Maple", thickness=0.75, width=2.0, length=24.0, quantity=5),
        WoodStockPiece("Walnut", thickness=0.75, width=2.0, length=24.0, quantity=5),
    ]


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)
