"""Project file configuration: schema, loading and domain adapters."""

from cuttingboards.application.config.adapter import (
    config_to_construction_config,
    config_to_desired_board,
    config_to_pattern,
    config_to_stock,
    construction_config_from_settings,
    stock_input_from_config,
)
from cuttingboards.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cuttingboards.application.config.schema import (
    SUPPORTED_VERSIONS,
    ConstructionSettingsConfig,
    DesignerConfiguration,
    DesiredBoardConfig,
    PatternSelectionConfig,
    StockPieceConfig,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "ConstructionSettingsConfig",
    "DesignerConfiguration",
    "DesiredBoardConfig",
    "PatternSelectionConfig",
    "StockPieceConfig",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Adapters
    "config_to_construction_config",
    "config_to_desired_board",
    "config_to_pattern",
    "config_to_stock",
    "construction_config_from_settings",
    "stock_input_from_config",
]
