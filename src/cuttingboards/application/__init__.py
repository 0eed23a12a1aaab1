"""Application layer - use cases and DTOs."""

from .commands import (
    CalculateRequirementsCommand,
    GenerateDesignsCommand,
    RegeneratePatternCommand,
)
from .dtos import DesignsOutput, DesiredBoardInput, RequirementsOutput, StockPieceInput

__all__ = [
    "CalculateRequirementsCommand",
    "DesignsOutput",
    "DesiredBoardInput",
    "GenerateDesignsCommand",
    "RegeneratePatternCommand",
    "RequirementsOutput",
    "StockPieceInput",
]
