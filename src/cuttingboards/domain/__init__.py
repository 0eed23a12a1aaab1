"""Domain layer - core business logic."""

from .services import (
    ConstructionConfig,
    ConstructionGenerator,
    PatternNotFoundError,
    PatternRegenerator,
    StockRequirementCalculator,
    get_woven_pattern,
)
from .value_objects import (
    AccessorySettings,
    BoardDimensions,
    ConstructionKind,
    DesignOption,
    DesiredBoard,
    HandleHoleSettings,
    InvalidDesignOptionError,
    JuiceGrooveSettings,
    PatternInfo,
    PatternNeeds,
    StockRequirementReport,
    WoodStockPiece,
    WoodTypeRequirement,
    WovenPattern,
)

__all__ = [
    "AccessorySettings",
    "BoardDimensions",
    "ConstructionConfig",
    "ConstructionGenerator",
    "ConstructionKind",
    "DesignOption",
    "DesiredBoard",
    "HandleHoleSettings",
    "InvalidDesignOptionError",
    "JuiceGrooveSettings",
    "PatternInfo",
    "PatternNeeds",
    "PatternNotFoundError",
    "PatternRegenerator",
    "StockRequirementCalculator",
    "StockRequirementReport",
    "WoodStockPiece",
    "WoodTypeRequirement",
    "WovenPattern",
    "get_woven_pattern",
]
