"""Cutting board domain services.

This package provides:
- ConstructionGenerator for face, edge and end-grain glue-ups
- PatternRegenerator for randomized strip arrangements
- StockRequirementCalculator for purchase/sufficiency estimates
- The woven pattern catalog and wood color palette
"""

from __future__ import annotations

from .constants import (
    DEFAULT_KERF_WIDTH,
    DEFAULT_SEGMENT_WIDTH,
    FALLBACK_WOOD_COLOR,
    MAX_CUT_COUNT,
    MAX_KERF_WIDTH,
    MAX_SEGMENT_WIDTH,
    MAX_STOCK_LENGTH,
    MAX_STOCK_QUANTITY,
    MAX_STOCK_THICKNESS,
    MAX_STOCK_WIDTH,
    MIN_SEGMENT_WIDTH,
    WOOD_COLORS,
)
from .config import ConstructionConfig
from .construction import ConstructionGenerator, brick_lay_rows, build_base_pattern
from .pattern_regenerator import (
    FLIP_POLICIES,
    FlipPolicy,
    PatternRegenerator,
    apply_flip_policy,
)
from .stock_requirements import StockRequirementCalculator
from .wood_colors import default_wood_color, resolve_wood_color
from .woven_patterns import (
    WOVEN_PATTERNS,
    PatternNotFoundError,
    get_woven_pattern,
    list_woven_patterns,
)

__all__ = [
    # Constants
    "DEFAULT_KERF_WIDTH",
    "DEFAULT_SEGMENT_WIDTH",
    "FALLBACK_WOOD_COLOR",
    "MAX_CUT_COUNT",
    "MAX_KERF_WIDTH",
    "MAX_SEGMENT_WIDTH",
    "MAX_STOCK_LENGTH",
    "MAX_STOCK_QUANTITY",
    "MAX_STOCK_THICKNESS",
    "MAX_STOCK_WIDTH",
    "MIN_SEGMENT_WIDTH",
    "WOOD_COLORS",
    # Config
    "ConstructionConfig",
    # Construction
    "ConstructionGenerator",
    "brick_lay_rows",
    "build_base_pattern",
    # Pattern regeneration
    "FLIP_POLICIES",
    "FlipPolicy",
    "PatternRegenerator",
    "apply_flip_policy",
    # Stock requirements
    "StockRequirementCalculator",
    # Colors
    "default_wood_color",
    "resolve_wood_color",
    # Woven patterns
    "WOVEN_PATTERNS",
    "PatternNotFoundError",
    "get_woven_pattern",
    "list_woven_patterns",
]
