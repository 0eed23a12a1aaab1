"""Pydantic schemas for the REST API."""

from cuttingboards.web.schemas.common import (
    DesignOptionSchema,
    DimensionsSchema,
    StockPieceSchema,
)
from cuttingboards.web.schemas.requests import (
    DesiredBoardSchema,
    GenerateDesignsRequest,
    ProjectRequest,
    RegeneratePatternRequest,
    RequirementsRequest,
)
from cuttingboards.web.schemas.responses import (
    DesignOptionsSchema,
    ErrorResponseSchema,
    PatternInfoSchema,
    RequirementReportSchema,
    WoodTypeRequirementSchema,
    WovenPatternListSchema,
    WovenPatternSchema,
)

__all__ = [
    # Common
    "DesignOptionSchema",
    "DimensionsSchema",
    "StockPieceSchema",
    # Requests
    "DesiredBoardSchema",
    "GenerateDesignsRequest",
    "ProjectRequest",
    "RegeneratePatternRequest",
    "RequirementsRequest",
    # Responses
    "DesignOptionsSchema",
    "ErrorResponseSchema",
    "PatternInfoSchema",
    "RequirementReportSchema",
    "WoodTypeRequirementSchema",
    "WovenPatternListSchema",
    "WovenPatternSchema",
]
