"""Pydantic models for cutting board project files.

A project file describes the stock on hand, the board the user wants to
make, saw settings, and optionally a woven pattern selection.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from cuttingboards.domain.services import (
    DEFAULT_KERF_WIDTH,
    DEFAULT_SEGMENT_WIDTH,
    MAX_KERF_WIDTH,
    MAX_SEGMENT_WIDTH,
    MAX_STOCK_LENGTH,
    MAX_STOCK_QUANTITY,
    MAX_STOCK_THICKNESS,
    MAX_STOCK_WIDTH,
    MIN_SEGMENT_WIDTH,
    WOVEN_PATTERNS,
)

# Version 1.0: Stock list and construction settings
# Version 1.1: Desired board and woven pattern selection
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class StockPieceConfig(BaseModel):
    """One stock board type.

    Attributes:
        wood_type: Species tag. Blank entries are skipped in patterns.
        thickness: Board thickness in inches.
        width: Board width in inches.
        length: Board length in inches.
        quantity: Boards on hand.
        color_override: Optional hex display color.
    """

    model_config = ConfigDict(extra="forbid")

    wood_type: str = Field(default="", description="Wood species")
    thickness: float = Field(
        default=0.75, ge=0, le=MAX_STOCK_THICKNESS, description="Thickness in inches"
    )
    width: float = Field(
        default=2.0, ge=0, le=MAX_STOCK_WIDTH, description="Width in inches"
    )
    length: float = Field(
        default=24.0, ge=0, le=MAX_STOCK_LENGTH, description="Length in inches"
    )
    quantity: int = Field(
        default=1, ge=0, le=MAX_STOCK_QUANTITY, description="Boards on hand"
    )
    color_override: str | None = Field(
        default=None,
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Display color override (#RRGGBB)",
    )


class DesiredBoardConfig(BaseModel):
    """Target board size. Zero values are allowed and yield zero needs."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=20.0, ge=0, le=120, description="Width in inches")
    length: float = Field(default=16.0, ge=0, le=120, description="Length in inches")
    thickness: float = Field(default=1.5, ge=0, le=12, description="Thickness in inches")


class ConstructionSettingsConfig(BaseModel):
    """Saw and cross-cut settings.

    Attributes:
        segment_width: End-grain slice width in inches.
        kerf_width: Saw blade kerf in inches (1/8" typical).
    """

    model_config = ConfigDict(extra="forbid")

    segment_width: float = Field(
        default=DEFAULT_SEGMENT_WIDTH,
        ge=MIN_SEGMENT_WIDTH,
        le=MAX_SEGMENT_WIDTH,
        description="End-grain slice width",
    )
    kerf_width: float = Field(
        default=DEFAULT_KERF_WIDTH, ge=0, le=MAX_KERF_WIDTH, description="Saw kerf width"
    )


class PatternSelectionConfig(BaseModel):
    """Woven pattern and which stock entries supply its two colors."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(..., description="Woven pattern key")
    main_index: int = Field(default=0, ge=0, description="Stock index of main color")
    accent_index: int = Field(default=1, ge=0, description="Stock index of accent color")

    @field_validator("key")
    @classmethod
    def validate_known_pattern(cls, v: str) -> str:
        if v not in WOVEN_PATTERNS:
            raise ValueError(
                f"Unknown woven pattern '{v}'. Available: {sorted(WOVEN_PATTERNS)}"
            )
        return v


class DesignerConfiguration(BaseModel):
    """Root model for a cutting board project file.

    Example:
        >>> config = DesignerConfiguration(
        ...     schema_version="1.1",
        ...     stock=[StockPieceConfig(wood_type="Maple", quantity=10)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    stock: list[StockPieceConfig] = Field(default_factory=list)
    desired_board: DesiredBoardConfig = Field(default_factory=DesiredBoardConfig)
    settings: ConstructionSettingsConfig = Field(
        default_factory=ConstructionSettingsConfig
    )
    pattern: PatternSelectionConfig | None = Field(
        default=None, description="Woven pattern selection (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
