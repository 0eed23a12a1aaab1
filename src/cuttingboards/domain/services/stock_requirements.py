"""Stock requirement estimates for a desired cutting board.

This module provides StockRequirementCalculator, which answers "how many
boards of each stock type do I need, and do I have enough?" for either a
plain edge-grain glue-up or a two-color woven pattern. It is a capacity
estimator: strips are counted per board, not nested.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cuttingboards.domain.value_objects import (
    DesiredBoard,
    PatternInfo,
    StockRequirementReport,
    WoodStockPiece,
    WoodTypeRequirement,
    WovenPattern,
)

from .stock_math import boards_needed, capacity, demand
from .wood_colors import resolve_wood_color

logger = logging.getLogger(__name__)


class StockRequirementCalculator:
    """Service for estimating how much stock a board requires.

    Every quantity described as "needed" rounds up and every quantity
    described as "per board" rounds down. Zero-sized boards or an empty
    stock list produce a report with zero needs.
    """

    def calculate(
        self,
        desired: DesiredBoard,
        pieces: Sequence[WoodStockPiece],
        pattern: WovenPattern | None = None,
        main_index: int = 0,
        accent_index: int = 1,
    ) -> StockRequirementReport:
        """Build a requirement report.

        Args:
            desired: Target board size.
            pieces: Stock on hand.
            pattern: Optional woven pattern. When given, only the main and
                accent stock entries are evaluated.
            main_index: Index into ``pieces`` of the main (outer layer) color.
            accent_index: Index into ``pieces`` of the accent (middle layer) color.

        Returns:
            StockRequirementReport. If the pattern selection is invalid the
            report carries ``pattern_error`` and no per-wood breakdown.
        """
        strips_needed = 0
        if pieces and not desired.is_degenerate:
            strips_needed = demand(desired.length, pieces[0].width)

        if pattern is None:
            requirements = self._plain_requirements(desired, pieces)
            return self._aggregate(desired, strips_needed, requirements)

        error = self._selection_error(pieces, main_index, accent_index)
        if error is not None:
            logger.warning("Cannot compute %s: %s", pattern.name, error)
            return StockRequirementReport(
                total_area=desired.area,
                strips_needed=strips_needed,
                overall_sufficient=False,
                pattern_error=error,
            )

        requirements, info = self._pattern_requirements(
            desired, pieces, pattern, main_index, accent_index
        )
        return self._aggregate(desired, strips_needed, requirements, info)

    def _plain_requirements(
        self, desired: DesiredBoard, pieces: Sequence[WoodStockPiece]
    ) -> list[WoodTypeRequirement]:
        requirements: list[WoodTypeRequirement] = []
        for piece in pieces:
            needed = 0
            if not desired.is_degenerate:
                # Each strip spans the board width and adds its own width to the length
                strips_per_board = capacity(piece.length, desired.width)
                strips = demand(desired.length, piece.width)
                needed = boards_needed(strips, strips_per_board)
            requirements.append(self._requirement(piece, needed, pieces))
        return requirements

    def _pattern_requirements(
        self,
        desired: DesiredBoard,
        pieces: Sequence[WoodStockPiece],
        pattern: WovenPattern,
        main_index: int,
        accent_index: int,
    ) -> tuple[list[WoodTypeRequirement], PatternInfo]:
        needs = pattern.calculate_needs(desired.width, desired.length)
        info = PatternInfo(
            name=pattern.name,
            squares_wide=needs.squares_wide,
            squares_long=needs.squares_long,
            total_squares=needs.total_squares,
            main_pieces_needed=needs.main_pieces_needed,
            accent_pieces_needed=needs.accent_pieces_needed,
        )

        selected = (
            (pieces[main_index], needs.main_pieces_needed),
            (pieces[accent_index], needs.accent_pieces_needed),
        )
        requirements: list[WoodTypeRequirement] = []
        for piece, pieces_needed in selected:
            needed = 0
            if not desired.is_degenerate:
                per_board = capacity(piece.length, pattern.cube_size)
                needed = boards_needed(pieces_needed, per_board)
            requirements.append(self._requirement(piece, needed, pieces))
        return requirements, info

    @staticmethod
    def _selection_error(
        pieces: Sequence[WoodStockPiece], main_index: int, accent_index: int
    ) -> str | None:
        if len(pieces) < 2:
            return "Woven patterns need at least 2 stock entries"
        for label, index in (("main", main_index), ("accent", accent_index)):
            if not 0 <= index < len(pieces):
                return f"{label} color index {index} is out of range"
        if main_index == accent_index:
            return "Main and accent colors must be different stock entries"
        return None

    @staticmethod
    def _requirement(
        piece: WoodStockPiece, needed: int, pieces: Sequence[WoodStockPiece]
    ) -> WoodTypeRequirement:
        return WoodTypeRequirement(
            wood_type=piece.wood_type,
            boards_needed=needed,
            boards_available=piece.quantity,
            sufficient=piece.quantity >= needed,
            color=resolve_wood_color(piece.wood_type, pieces),
        )

    @staticmethod
    def _aggregate(
        desired: DesiredBoard,
        strips_needed: int,
        requirements: list[WoodTypeRequirement],
        info: PatternInfo | None = None,
    ) -> StockRequirementReport:
        return StockRequirementReport(
            total_area=desired.area,
            strips_needed=strips_needed,
            per_wood_type=tuple(requirements),
            total_boards_needed=sum(r.boards_needed for r in requirements),
            total_boards_available=sum(r.boards_available for r in requirements),
            overall_sufficient=all(r.sufficient for r in requirements),
            pattern_info=info,
        )
