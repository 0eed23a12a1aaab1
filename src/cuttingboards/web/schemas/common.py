"""Shared Pydantic schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cuttingboards.application.dtos import StockPieceInput
from cuttingboards.domain import ConstructionKind, DesignOption
from cuttingboards.domain.services import (
    MAX_CUT_COUNT,
    MAX_STOCK_LENGTH,
    MAX_STOCK_QUANTITY,
    MAX_STOCK_THICKNESS,
    MAX_STOCK_WIDTH,
)


class StockPieceSchema(BaseModel):
    """One stock board type in an API request."""

    model_config = ConfigDict(populate_by_name=True)

    wood_type: str = Field(default="", alias="woodType", description="Wood species")
    thickness: float = Field(
        ..., ge=0, le=MAX_STOCK_THICKNESS, description="Thickness in inches"
    )
    width: float = Field(..., ge=0, le=MAX_STOCK_WIDTH, description="Width in inches")
    length: float = Field(
        ..., ge=0, le=MAX_STOCK_LENGTH, description="Length in inches"
    )
    quantity: int = Field(
        default=1, ge=0, le=MAX_STOCK_QUANTITY, description="Boards on hand"
    )
    color_override: str | None = Field(
        default=None, alias="colorOverride", description="Display color override"
    )

    def to_input(self) -> StockPieceInput:
        return StockPieceInput(
            wood_type=self.wood_type,
            thickness=self.thickness,
            width=self.width,
            length=self.length,
            quantity=self.quantity,
            color_override=self.color_override,
        )


class DimensionsSchema(BaseModel):
    """Finished board dimensions in inches."""

    length: float
    width: float
    thickness: float


class DesignOptionSchema(BaseModel):
    """Serialized design option, as returned by and accepted from the API."""

    model_config = ConfigDict(populate_by_name=True)

    construction_kind: ConstructionKind = Field(..., alias="constructionKind")
    dimensions: DimensionsSchema
    cut_count: int = Field(default=0, ge=0, le=MAX_CUT_COUNT, alias="cutCount")
    kerf_loss: float = Field(default=0.0, ge=0, alias="kerfLoss")
    pattern: list[str] = Field(default_factory=list)
    accessory_settings: dict[str, Any] = Field(
        default_factory=dict, alias="accessorySettings"
    )
    description: str = ""

    @classmethod
    def from_domain(cls, option: DesignOption) -> "DesignOptionSchema":
        return cls.model_validate(option.to_dict())

    def to_domain(self) -> DesignOption:
        """Rebuild the domain option; raises InvalidDesignOptionError if malformed."""
        return DesignOption.from_dict(self.model_dump(by_alias=True, mode="json"))
