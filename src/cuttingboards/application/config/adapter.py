"""Conversion from project configuration models to DTOs and domain config."""

from cuttingboards.application.config.schema import (
    ConstructionSettingsConfig,
    DesignerConfiguration,
    StockPieceConfig,
)
from cuttingboards.application.dtos import DesiredBoardInput, StockPieceInput
from cuttingboards.domain import ConstructionConfig, WovenPattern, get_woven_pattern


def stock_input_from_config(config: StockPieceConfig) -> StockPieceInput:
    return StockPieceInput(
        wood_type=config.wood_type,
        thickness=config.thickness,
        width=config.width,
        length=config.length,
        quantity=config.quantity,
        color_override=config.color_override,
    )


def config_to_stock(config: DesignerConfiguration) -> list[StockPieceInput]:
    """Convert the configured stock list, preserving order."""
    return [stock_input_from_config(piece) for piece in config.stock]


def config_to_desired_board(config: DesignerConfiguration) -> DesiredBoardInput:
    board = config.desired_board
    return DesiredBoardInput(
        width=board.width,
        length=board.length,
        thickness=board.thickness,
    )


def construction_config_from_settings(
    settings: ConstructionSettingsConfig,
) -> ConstructionConfig:
    return ConstructionConfig(
        segment_width=settings.segment_width,
        kerf_width=settings.kerf_width,
    )


def config_to_construction_config(config: DesignerConfiguration) -> ConstructionConfig:
    return construction_config_from_settings(config.settings)


def config_to_pattern(
    config: DesignerConfiguration,
) -> tuple[WovenPattern | None, int, int]:
    """Resolve the woven pattern selection.

    Returns:
        Tuple of (pattern or None, main index, accent index). Indices default
        to 0 and 1 when no pattern is selected.
    """
    if config.pattern is None:
        return None, 0, 1
    selection = config.pattern
    return (
        get_woven_pattern(selection.key),
        selection.main_index,
        selection.accent_index,
    )
