"""Rounding helpers shared by the construction and stock engines.

Capacities ("how many fit") always round down; demands ("how many are
needed") always round up. Every helper returns 0 instead of dividing by
zero.
"""

from __future__ import annotations

import math


def capacity(total: float, unit: float) -> int:
    """Whole units of size ``unit`` that fit in ``total`` (floor)."""
    if unit <= 0 or total <= 0:
        return 0
    return math.floor(total / unit)


def demand(total: float, unit: float) -> int:
    """Units of size ``unit`` required to cover ``total`` (ceiling)."""
    if unit <= 0 or total <= 0:
        return 0
    return math.ceil(total / unit)


def boards_needed(pieces_needed: int, pieces_per_board: int) -> int:
    """Boards to buy when each yields ``pieces_per_board`` pieces.

    A board that yields nothing cannot satisfy any demand, so the result
    is 0 rather than infinite.
    """
    if pieces_per_board <= 0:
        return 0
    return math.ceil(pieces_needed / pieces_per_board)


def mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)
