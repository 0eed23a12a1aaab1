"""Shop constants for board construction and stock estimates."""

from __future__ import annotations

# Saw blade kerf (1/8")
DEFAULT_KERF_WIDTH: float = 0.125

# Width of each cross-cut slice when building end-grain boards
DEFAULT_SEGMENT_WIDTH: float = 2.0

# Display color for wood types not in the palette
FALLBACK_WOOD_COLOR = "#8D6E63"

# Default display colors keyed by lower-cased wood type
WOOD_COLORS: dict[str, str] = {
    "walnut": "#5D4037",
    "maple": "#F5DEB3",
    "cherry": "#CD853F",
    "oak": "#D2B48C",
    "mahogany": "#8B4513",
    "purple heart": "#663399",
    "purpleheart": "#722F5E",
    "padauk": "#CC6633",
    "wenge": "#3E2723",
    "ash": "#D4C5B3",
    "birch": "#F3E5AB",
    "hickory": "#B89968",
    "teak": "#B5651D",
    "sapele": "#7F5347",
}

# Input limits shared by project files, the CLI and the REST API
MAX_STOCK_THICKNESS: float = 12.0
MAX_STOCK_WIDTH: float = 48.0
MAX_STOCK_LENGTH: float = 240.0
MAX_STOCK_QUANTITY: int = 1000
MIN_SEGMENT_WIDTH: float = 0.125
MAX_SEGMENT_WIDTH: float = 24.0
MAX_KERF_WIDTH: float = 0.5

# Most cross-cuts the longest allowed stock can yield
MAX_CUT_COUNT: int = int(MAX_STOCK_LENGTH / MIN_SEGMENT_WIDTH)
