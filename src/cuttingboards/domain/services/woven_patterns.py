"""Catalog of two-color woven patterns."""

from __future__ import annotations

from cuttingboards.domain.value_objects import WovenPattern


class PatternNotFoundError(Exception):
    """Raised when a woven pattern key is not in the catalog."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown woven pattern: {key}")


WOVEN_PATTERNS: dict[str, WovenPattern] = {
    "woven-2color": WovenPattern(
        key="woven-2color",
        name="2 Color Woven Pattern",
        description=(
            'Brick parquet - each 2"x2" cube has 3 layers (outer/accent/outer)'
        ),
        cube_size=2.0,
    ),
    "woven-2color-thin": WovenPattern(
        key="woven-2color-thin",
        name="2 Color Woven Pattern with Thin Strip",
        description=(
            'Basketweave with thin accent - each 1.75"x1.75" cube has 3 layers '
            '(0.75"/0.25"/0.75")'
        ),
        cube_size=1.75,
    ),
}


def get_woven_pattern(key: str) -> WovenPattern:
    """Look up a woven pattern by key.

    Raises:
        PatternNotFoundError: If the key is unknown.
    """
    try:
        return WOVEN_PATTERNS[key]
    except KeyError:
        raise PatternNotFoundError(key) from None


def list_woven_patterns() -> list[WovenPattern]:
    return list(WOVEN_PATTERNS.values())
