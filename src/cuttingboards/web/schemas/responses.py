"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cuttingboards.web.schemas.common import DesignOptionSchema


class DesignOptionsSchema(BaseModel):
    """Generated design options."""

    options: list[DesignOptionSchema]
    feasible: bool = Field(..., description="False when no option has a usable size")


class WoodTypeRequirementSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    wood_type: str = Field(..., alias="woodType")
    boards_needed: int = Field(..., alias="boardsNeeded")
    boards_available: int = Field(..., alias="boardsAvailable")
    sufficient: bool
    color: str


class PatternInfoSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    squares_wide: int = Field(..., alias="squaresWide")
    squares_long: int = Field(..., alias="squaresLong")
    total_squares: int = Field(..., alias="totalSquares")
    main_pieces_needed: int = Field(..., alias="mainPiecesNeeded")
    accent_pieces_needed: int = Field(..., alias="accentPiecesNeeded")


class RequirementReportSchema(BaseModel):
    """Stock requirement report."""

    model_config = ConfigDict(populate_by_name=True)

    total_area: float = Field(..., alias="totalArea")
    strips_needed: int = Field(..., alias="stripsNeeded")
    per_wood_type: list[WoodTypeRequirementSchema] = Field(..., alias="perWoodType")
    total_boards_needed: int = Field(..., alias="totalBoardsNeeded")
    total_boards_available: int = Field(..., alias="totalBoardsAvailable")
    overall_sufficient: bool = Field(..., alias="overallSufficient")
    pattern_info: PatternInfoSchema | None = Field(default=None, alias="patternInfo")
    pattern_error: str | None = Field(default=None, alias="patternError")


class WovenPatternSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str
    name: str
    description: str
    cube_size: float = Field(..., alias="cubeSize")
    required_colors: int = Field(..., alias="requiredColors")


class WovenPatternListSchema(BaseModel):
    patterns: list[WovenPatternSchema]


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: Any = None
