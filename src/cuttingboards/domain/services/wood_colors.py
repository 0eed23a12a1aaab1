"""Display colors for wood types."""

from __future__ import annotations

from collections.abc import Sequence

from cuttingboards.domain.value_objects import WoodStockPiece

from .constants import FALLBACK_WOOD_COLOR, WOOD_COLORS


def default_wood_color(wood_type: str) -> str:
    return WOOD_COLORS.get(wood_type.strip().lower(), FALLBACK_WOOD_COLOR)


def resolve_wood_color(
    wood_type: str, pieces: Sequence[WoodStockPiece] = ()
) -> str:
    """Color for a wood type, preferring a stock piece's override.

    The first piece whose wood type matches case-insensitively and carries
    a ``color_override`` wins; otherwise the palette color is used.
    """
    wanted = wood_type.strip().lower()
    for piece in pieces:
        if piece.color_override and piece.wood_type.strip().lower() == wanted:
            return piece.color_override
    return default_wood_color(wood_type)
