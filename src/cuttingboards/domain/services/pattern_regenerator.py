"""Pattern regeneration for existing design options.

Shuffles the strip order of a design option (and, for end-grain boards,
picks a new row-flip arrangement) without touching its geometry.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from cuttingboards.domain.value_objects import DesignOption, WoodStockPiece

from .construction import build_base_pattern

logger = logging.getLogger(__name__)

# Decides whether a given 0-based row is reversed
FlipPolicy = Callable[[int, random.Random], bool]


def _flip_even_rows(row: int, rng: random.Random) -> bool:
    return row % 2 == 0


def _flip_every_third_row(row: int, rng: random.Random) -> bool:
    return row % 3 == 0


def _flip_odd_rows(row: int, rng: random.Random) -> bool:
    return row % 2 == 1


def _flip_random_rows(row: int, rng: random.Random) -> bool:
    return rng.random() > 0.5


FLIP_POLICIES: dict[str, FlipPolicy] = {
    "even": _flip_even_rows,
    "every_third": _flip_every_third_row,
    "odd": _flip_odd_rows,
    "random": _flip_random_rows,
}


def apply_flip_policy(
    base: Sequence[str],
    rows: int,
    policy: FlipPolicy,
    rng: random.Random,
) -> list[str]:
    """Lay ``base`` out in ``rows`` rows, reversing rows the policy selects."""
    result: list[str] = []
    reversed_base = list(reversed(base))
    for row in range(rows):
        result.extend(reversed_base if policy(row, rng) else base)
    return result[: rows * len(base)]


class PatternRegenerator:
    """Service producing fresh gluing patterns for a design option.

    Randomness comes from the injected ``random.Random`` so tests can seed
    it. Repeated calls generally yield different patterns, but the length
    and wood-type multiset always match what the stock list produces.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def regenerate(
        self, option: DesignOption, pieces: Sequence[WoodStockPiece]
    ) -> DesignOption:
        """Return a copy of ``option`` with a new pattern.

        Args:
            option: Existing option, possibly round-tripped through JSON.
            pieces: Current stock list.

        Returns:
            New DesignOption with identical dimensions, cut count and kerf
            loss. The option is returned unchanged when no stock piece has
            a wood type.
        """
        base = build_base_pattern(pieces)
        if not base:
            logger.debug("No typed stock; keeping existing pattern")
            return option

        self.rng.shuffle(base)

        if not option.construction_kind.is_end_grain:
            return option.with_pattern(base)

        rows = self._row_count(option, pieces)
        policy_name = self.rng.choice(list(FLIP_POLICIES))
        logger.debug("Regenerating %d rows with %s flip policy", rows, policy_name)
        pattern = apply_flip_policy(base, rows, FLIP_POLICIES[policy_name], self.rng)
        return option.with_pattern(pattern)

    @staticmethod
    def _row_count(option: DesignOption, pieces: Sequence[WoodStockPiece]) -> int:
        if option.cut_count:
            return option.cut_count
        total_quantity = sum(piece.quantity for piece in pieces)
        if total_quantity <= 0:
            return 0
        return len(option.pattern) // total_quantity
