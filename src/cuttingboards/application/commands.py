"""Application commands (use cases) for cutting board design."""

from __future__ import annotations

import logging
import random

from cuttingboards.domain import (
    ConstructionConfig,
    ConstructionGenerator,
    DesignOption,
    PatternRegenerator,
    StockRequirementCalculator,
    WovenPattern,
)

from .dtos import DesignsOutput, DesiredBoardInput, RequirementsOutput, StockPieceInput

logger = logging.getLogger(__name__)


def _validate_stock(stock: list[StockPieceInput]) -> list[str]:
    errors: list[str] = []
    for piece in stock:
        errors.extend(piece.validate())
    return errors


class GenerateDesignsCommand:
    """Command to generate the four construction options for a stock list."""

    def execute(
        self,
        stock: list[StockPieceInput],
        config: ConstructionConfig | None = None,
    ) -> DesignsOutput:
        """Execute the generation command.

        Args:
            stock: Stock entries in gluing order.
            config: Saw settings; defaults to 2" segments and 1/8" kerf.

        Returns:
            DesignsOutput with the options, or with errors if the input is invalid.
            An empty option list means no stock entry had a wood type.
        """
        errors = _validate_stock(stock)
        if errors:
            return DesignsOutput(errors=errors)

        pieces = [piece.to_stock_piece() for piece in stock]
        options = ConstructionGenerator(config).generate(pieces)
        logger.info("Generated %d design options from %d stock entries", len(options), len(pieces))
        return DesignsOutput(options=options)


class RegeneratePatternCommand:
    """Command to reshuffle the pattern of existing design options."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.regenerator = PatternRegenerator(rng)

    def execute(
        self,
        options: list[DesignOption],
        stock: list[StockPieceInput],
    ) -> DesignsOutput:
        """Regenerate every given option against the current stock list.

        Geometry (dimensions, cut count, kerf loss) is carried over unchanged.
        """
        errors = _validate_stock(stock)
        if errors:
            return DesignsOutput(errors=errors)

        pieces = [piece.to_stock_piece() for piece in stock]
        return DesignsOutput(
            options=[self.regenerator.regenerate(option, pieces) for option in options]
        )


class CalculateRequirementsCommand:
    """Command to estimate stock requirements for a desired board."""

    def __init__(self, calculator: StockRequirementCalculator | None = None) -> None:
        self.calculator = calculator or StockRequirementCalculator()

    def execute(
        self,
        desired: DesiredBoardInput,
        stock: list[StockPieceInput],
        pattern: WovenPattern | None = None,
        main_index: int = 0,
        accent_index: int = 1,
    ) -> RequirementsOutput:
        errors = desired.validate() + _validate_stock(stock)
        if errors:
            return RequirementsOutput(errors=errors)

        report = self.calculator.calculate(
            desired.to_desired_board(),
            [piece.to_stock_piece() for piece in stock],
            pattern=pattern,
            main_index=main_index,
            accent_index=accent_index,
        )
        return RequirementsOutput(report=report)
