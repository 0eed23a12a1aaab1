"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cuttingboards.domain import (
    DesignOption,
    DesiredBoard,
    StockRequirementReport,
    WoodStockPiece,
)
from cuttingboards.domain.services import (
    MAX_STOCK_LENGTH,
    MAX_STOCK_QUANTITY,
    MAX_STOCK_THICKNESS,
    MAX_STOCK_WIDTH,
)


@dataclass
class StockPieceInput:
    """Input DTO for one stock entry."""

    wood_type: str
    thickness: float
    width: float
    length: float
    quantity: int = 1
    color_override: str | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        label = self.wood_type.strip() or "(unnamed)"
        if self.thickness < 0:
            errors.append(f"{label}: thickness cannot be negative")
        if self.width < 0:
            errors.append(f"{label}: width cannot be negative")
        if self.length < 0:
            errors.append(f"{label}: length cannot be negative")
        if self.quantity < 0:
            errors.append(f"{label}: quantity cannot be negative")
        for name, value, limit in (
            ("thickness", self.thickness, MAX_STOCK_THICKNESS),
            ("width", self.width, MAX_STOCK_WIDTH),
            ("length", self.length, MAX_STOCK_LENGTH),
            ("quantity", self.quantity, MAX_STOCK_QUANTITY),
        ):
            if value > limit:
                errors.append(f"{label}: {name} cannot exceed {limit}")
        return errors

    def to_stock_piece(self) -> WoodStockPiece:
        return WoodStockPiece(
            wood_type=self.wood_type,
            thickness=self.thickness,
            width=self.width,
            length=self.length,
            quantity=self.quantity,
            color_override=self.color_override,
        )

    @classmethod
    def parse(cls, text: str) -> StockPieceInput:
        """Parse ``WOOD:THICKNESSxWIDTHxLENGTH:QTY`` (e.g. ``Maple:0.75x2x24:10``).

        Raises:
            ValueError: If the text does not follow the format.
        """
        try:
            wood_type, size, quantity = text.rsplit(":", 2)
            thickness, width, length = (float(v) for v in size.lower().split("x"))
            return cls(
                wood_type=wood_type.strip(),
                thickness=thickness,
                width=width,
                length=length,
                quantity=int(quantity),
            )
        except ValueError:
            raise ValueError(
                f"Invalid stock spec '{text}'; expected WOOD:TxWxL:QTY"
            ) from None


@dataclass
class DesiredBoardInput:
    """Input DTO for the target board size."""

    width: float
    length: float
    thickness: float

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.width < 0:
            errors.append("Desired width cannot be negative")
        if self.length < 0:
            errors.append("Desired length cannot be negative")
        if self.thickness < 0:
            errors.append("Desired thickness cannot be negative")
        return errors

    def to_desired_board(self) -> DesiredBoard:
        return DesiredBoard(width=self.width, length=self.length, thickness=self.thickness)


@dataclass
class DesignsOutput:
    """Output DTO for generated or regenerated design options."""

    options: list[DesignOption] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_feasible(self) -> bool:
        """False when nothing usable came out (no typed stock or zero-sized boards)."""
        return any(
            option.dimensions.length > 0 and option.dimensions.width > 0
            for option in self.options
        )


@dataclass
class RequirementsOutput:
    """Output DTO for a stock requirement estimate."""

    report: StockRequirementReport | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
