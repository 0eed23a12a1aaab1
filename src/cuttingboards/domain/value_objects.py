"""Value objects for the cutting board domain."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class ConstructionKind(str, Enum):
    """Ways a glue-up of stock strips can be built.

    Attributes:
        FACE_GRAIN: Strips glued on their narrow edge; the wide face shows.
        EDGE_GRAIN: Strips glued on their wide face; the narrow edge shows.
        END_GRAIN_FROM_EDGE: Edge-grain board cross-cut, rotated and reglued.
        END_GRAIN_FROM_FACE: Face-grain board cross-cut, rotated and reglued.
    """

    FACE_GRAIN = "face-grain"
    EDGE_GRAIN = "edge-grain"
    END_GRAIN_FROM_EDGE = "end-grain-from-edge-grain"
    END_GRAIN_FROM_FACE = "end-grain-from-face-grain"

    @property
    def is_end_grain(self) -> bool:
        return self in (
            ConstructionKind.END_GRAIN_FROM_EDGE,
            ConstructionKind.END_GRAIN_FROM_FACE,
        )

    @property
    def title(self) -> str:
        """Display title used in reports."""
        if self is ConstructionKind.END_GRAIN_FROM_EDGE:
            return "END GRAIN (FROM EDGE GRAIN)"
        if self is ConstructionKind.END_GRAIN_FROM_FACE:
            return "END GRAIN (FROM FACE GRAIN)"
        return self.value.replace("-", " ").upper()


@dataclass(frozen=True)
class WoodStockPiece:
    """One purchasable stock board type and how many are on hand.

    Attributes:
        wood_type: Species tag (e.g. "Maple"). Blank tags are skipped when
            building gluing patterns.
        thickness: Board thickness in inches.
        width: Board width in inches.
        length: Board length in inches.
        quantity: Number of boards available.
        color_override: Optional display color (hex string).
    """

    wood_type: str
    thickness: float
    width: float
    length: float
    quantity: int = 1
    color_override: str | None = None

    def __post_init__(self) -> None:
        if self.thickness < 0 or self.width < 0 or self.length < 0:
            raise ValueError("Stock dimensions must be non-negative")
        if self.quantity < 0:
            raise ValueError("Stock quantity must be non-negative")

    @property
    def has_wood_type(self) -> bool:
        return bool(self.wood_type and self.wood_type.strip())


@dataclass(frozen=True)
class DesiredBoard:
    """Target cutting board size in inches."""

    width: float
    length: float
    thickness: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.length < 0 or self.thickness < 0:
            raise ValueError("Desired board dimensions must be non-negative")

    @property
    def area(self) -> float:
        return self.width * self.length

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.length <= 0 or self.thickness <= 0


@dataclass(frozen=True)
class BoardDimensions:
    """Computed size of a finished glue-up."""

    length: float
    width: float
    thickness: float

    def to_dict(self) -> dict[str, float]:
        return {"length": self.length, "width": self.width, "thickness": self.thickness}


@dataclass(frozen=True)
class JuiceGrooveSettings:
    """Juice groove routed around the board perimeter.

    Attributes:
        enabled: Whether a groove is cut.
        width: Groove width in inches.
        depth: Groove depth in inches.
        distance: Distance from the board edge in inches.
    """

    enabled: bool = False
    width: float = 0.5
    depth: float = 0.25
    distance: float = 0.75


@dataclass(frozen=True)
class HandleHoleSettings:
    """Finger holes drilled through the board.

    Attributes:
        enabled: Whether holes are drilled.
        count: Number of holes.
        diameter: Hole diameter in inches.
        position_x: Horizontal position as a percentage from the left.
        position_y: Vertical position as a percentage from the top.
    """

    enabled: bool = False
    count: int = 2
    diameter: float = 1.25
    position_x: float = 50.0
    position_y: float = 50.0


@dataclass(frozen=True)
class AccessorySettings:
    """Per-design accessories. Carried through unchanged; never affects geometry."""

    juice_groove: JuiceGrooveSettings = field(default_factory=JuiceGrooveSettings)
    handle_holes: HandleHoleSettings = field(default_factory=HandleHoleSettings)

    def to_dict(self) -> dict[str, Any]:
        groove = self.juice_groove
        holes = self.handle_holes
        return {
            "juiceGroove": {
                "enabled": groove.enabled,
                "width": groove.width,
                "depth": groove.depth,
                "distance": groove.distance,
            },
            "handleHoles": {
                "enabled": holes.enabled,
                "count": holes.count,
                "diameter": holes.diameter,
                "positionX": holes.position_x,
                "positionY": holes.position_y,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> AccessorySettings:
        data = data or {}
        if not isinstance(data, dict):
            raise TypeError("accessorySettings must be an object")
        groove = data.get("juiceGroove") or {}
        holes = data.get("handleHoles") or {}
        if not isinstance(groove, dict) or not isinstance(holes, dict):
            raise TypeError("juiceGroove and handleHoles must be objects")
        defaults_groove = JuiceGrooveSettings()
        defaults_holes = HandleHoleSettings()
        return cls(
            juice_groove=JuiceGrooveSettings(
                enabled=bool(groove.get("enabled", defaults_groove.enabled)),
                width=float(groove.get("width", defaults_groove.width)),
                depth=float(groove.get("depth", defaults_groove.depth)),
                distance=float(groove.get("distance", defaults_groove.distance)),
            ),
            handle_holes=HandleHoleSettings(
                enabled=bool(holes.get("enabled", defaults_holes.enabled)),
                count=int(holes.get("count", defaults_holes.count)),
                diameter=float(holes.get("diameter", defaults_holes.diameter)),
                position_x=float(holes.get("positionX", defaults_holes.position_x)),
                position_y=float(holes.get("positionY", defaults_holes.position_y)),
            ),
        )


class InvalidDesignOptionError(ValueError):
    """Raised when a serialized design option cannot be read back."""


@dataclass(frozen=True)
class DesignOption:
    """One physical construction of a laminated board.

    The dimensions, cut count and kerf loss are derived from the stock list
    and construction kind alone. Only ``pattern`` may be replaced afterwards.

    Attributes:
        construction_kind: How the board is glued up.
        dimensions: Finished length, width and thickness.
        cut_count: Number of cross-cuts (0 for face and edge grain).
        kerf_loss: Total material removed by the saw in inches.
        pattern: Wood type of each strip or segment in gluing order.
        accessories: Opaque groove/handle configuration.
        description: Human-readable build instructions.
    """

    construction_kind: ConstructionKind
    dimensions: BoardDimensions
    cut_count: int = 0
    kerf_loss: float = 0.0
    pattern: tuple[str, ...] = ()
    accessories: AccessorySettings = field(default_factory=AccessorySettings)
    description: str = ""

    def with_pattern(self, pattern: tuple[str, ...] | list[str]) -> DesignOption:
        """Return a copy with only the gluing pattern replaced."""
        return replace(self, pattern=tuple(pattern))

    def to_dict(self) -> dict[str, Any]:
        return {
            "constructionKind": self.construction_kind.value,
            "dimensions": self.dimensions.to_dict(),
            "cutCount": self.cut_count,
            "kerfLoss": self.kerf_loss,
            "pattern": list(self.pattern),
            "accessorySettings": self.accessories.to_dict(),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DesignOption:
        """Rebuild an option from its serialized form.

        Raises:
            InvalidDesignOptionError: If required fields are missing or malformed.
        """
        try:
            kind = ConstructionKind(data["constructionKind"])
            dims = data["dimensions"]
            dimensions = BoardDimensions(
                length=float(dims["length"]),
                width=float(dims["width"]),
                thickness=float(dims["thickness"]),
            )
            pattern = tuple(str(wood) for wood in data.get("pattern", []))
            cut_count = data.get("cutCount", 0)
            if isinstance(cut_count, float) and cut_count.is_integer():
                cut_count = int(cut_count)
            if isinstance(cut_count, bool) or not isinstance(cut_count, int) or cut_count < 0:
                raise ValueError(f"cutCount must be a non-negative integer, got {cut_count!r}")
            kerf_loss = float(data.get("kerfLoss", 0.0))
            if kerf_loss < 0:
                raise ValueError("kerfLoss cannot be negative")
            return cls(
                construction_kind=kind,
                dimensions=dimensions,
                cut_count=cut_count,
                kerf_loss=kerf_loss,
                pattern=pattern,
                accessories=AccessorySettings.from_dict(data.get("accessorySettings")),
                description=str(data.get("description", "")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidDesignOptionError(f"Invalid design option: {e}") from e


@dataclass(frozen=True)
class PatternNeeds:
    """Cube counts and layer pieces required by a woven pattern."""

    squares_wide: int
    squares_long: int
    total_squares: int
    main_pieces_needed: int
    accent_pieces_needed: int


@dataclass(frozen=True)
class WovenPattern:
    """A two-color woven (basketweave) pattern built from laminated cubes.

    Each visible cube is a three-layer sandwich: main layers on the outside,
    accent layer(s) in the middle.
    """

    key: str
    name: str
    description: str
    cube_size: float
    required_colors: int = 2
    main_layers_per_cube: int = 2
    accent_layers_per_cube: int = 1

    def __post_init__(self) -> None:
        if self.cube_size <= 0:
            raise ValueError("cube_size must be positive")

    def calculate_needs(self, width: float, length: float) -> PatternNeeds:
        squares_wide = max(0, math.floor(width / self.cube_size))
        squares_long = max(0, math.floor(length / self.cube_size))
        total = squares_wide * squares_long
        return PatternNeeds(
            squares_wide=squares_wide,
            squares_long=squares_long,
            total_squares=total,
            main_pieces_needed=total * self.main_layers_per_cube,
            accent_pieces_needed=total * self.accent_layers_per_cube,
        )


@dataclass(frozen=True)
class WoodTypeRequirement:
    """How many boards of one stock entry are needed versus on hand."""

    wood_type: str
    boards_needed: int
    boards_available: int
    sufficient: bool
    color: str = ""


@dataclass(frozen=True)
class PatternInfo:
    """Summary of a woven pattern's demand for a desired board."""

    name: str
    squares_wide: int
    squares_long: int
    total_squares: int
    main_pieces_needed: int
    accent_pieces_needed: int


@dataclass(frozen=True)
class StockRequirementReport:
    """Purchase/sufficiency report for a desired board.

    Attributes:
        total_area: Face area of the desired board in square inches.
        strips_needed: Strips needed from the first stock entry (plain mode).
        per_wood_type: One entry per evaluated stock entry.
        total_boards_needed: Sum of boards needed over the evaluated set.
        total_boards_available: Sum of quantities over the evaluated set.
        overall_sufficient: True when every evaluated entry is sufficient.
        pattern_info: Woven pattern summary when a pattern was applied.
        pattern_error: Reason the selected pattern could not be computed.
    """

    total_area: float
    strips_needed: int = 0
    per_wood_type: tuple[WoodTypeRequirement, ...] = ()
    total_boards_needed: int = 0
    total_boards_available: int = 0
    overall_sufficient: bool = True
    pattern_info: PatternInfo | None = None
    pattern_error: str | None = None

    @property
    def pattern_valid(self) -> bool:
        return self.pattern_error is None
