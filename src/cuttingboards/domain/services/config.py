"""Construction configuration.

This module provides ConstructionConfig for the saw and cross-cut
settings used when deriving end-grain boards.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_KERF_WIDTH, DEFAULT_SEGMENT_WIDTH, MIN_SEGMENT_WIDTH


@dataclass(frozen=True)
class ConstructionConfig:
    """Configuration for the construction generator.

    Attributes:
        segment_width: Width of each cross-cut slice for end-grain boards
            in inches (default 2").
        kerf_width: Material removed by one saw cut in inches (1/8" typical).
    """

    segment_width: float = DEFAULT_SEGMENT_WIDTH
    kerf_width: float = DEFAULT_KERF_WIDTH

    def __post_init__(self) -> None:
        if self.segment_width < MIN_SEGMENT_WIDTH:
            raise ValueError(f"segment_width must be at least {MIN_SEGMENT_WIDTH}")
        if self.kerf_width < 0:
            raise ValueError("kerf_width must be non-negative")
