"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cuttingboards.domain.services import (
    DEFAULT_KERF_WIDTH,
    DEFAULT_SEGMENT_WIDTH,
    MAX_KERF_WIDTH,
    MAX_SEGMENT_WIDTH,
    MIN_SEGMENT_WIDTH,
)
from cuttingboards.web.schemas.common import DesignOptionSchema, StockPieceSchema


class GenerateDesignsRequest(BaseModel):
    """Request for generating design options."""

    model_config = ConfigDict(populate_by_name=True)

    stock: list[StockPieceSchema] = Field(..., description="Stock on hand")
    segment_width: float = Field(
        default=DEFAULT_SEGMENT_WIDTH,
        ge=MIN_SEGMENT_WIDTH,
        le=MAX_SEGMENT_WIDTH,
        alias="segmentWidth",
        description="End-grain slice width in inches",
    )
    kerf_width: float = Field(
        default=DEFAULT_KERF_WIDTH,
        ge=0,
        le=MAX_KERF_WIDTH,
        alias="kerfWidth",
        description="Saw kerf width in inches",
    )


class RegeneratePatternRequest(BaseModel):
    """Request for reshuffling the pattern of one saved design option."""

    model_config = ConfigDict(populate_by_name=True)

    option: DesignOptionSchema = Field(..., description="Previously generated option")
    stock: list[StockPieceSchema] = Field(..., description="Current stock list")
    seed: int | None = Field(default=None, description="Optional random seed")


class DesiredBoardSchema(BaseModel):
    """Target board size in inches. Zero values yield zero needs."""

    width: float = Field(..., ge=0)
    length: float = Field(..., ge=0)
    thickness: float = Field(default=1.5, ge=0)


class RequirementsRequest(BaseModel):
    """Request for a stock requirement estimate."""

    model_config = ConfigDict(populate_by_name=True)

    desired: DesiredBoardSchema
    stock: list[StockPieceSchema] = Field(default_factory=list)
    pattern: str | None = Field(default=None, description="Woven pattern key")
    main_index: int = Field(default=0, alias="mainIndex")
    accent_index: int = Field(default=1, alias="accentIndex")


class ProjectRequest(BaseModel):
    """A whole project file sent as JSON."""

    config: dict[str, Any] = Field(..., description="Project configuration")
