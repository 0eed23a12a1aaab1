"""Construction generator for laminated cutting boards.

This module derives the four standard glue-ups from a stock list:
face grain, edge grain, and the two end-grain boards made by cross-cutting
one of those, rotating each slice 90 degrees and regluing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cuttingboards.domain.value_objects import (
    BoardDimensions,
    ConstructionKind,
    DesignOption,
    WoodStockPiece,
)

from .config import ConstructionConfig
from .stock_math import capacity, mean

logger = logging.getLogger(__name__)


def _typed(pieces: Sequence[WoodStockPiece]) -> list[WoodStockPiece]:
    return [piece for piece in pieces if piece.has_wood_type]


def build_base_pattern(pieces: Sequence[WoodStockPiece]) -> list[str]:
    """Expand the stock list into one wood type per strip, in input order.

    Pieces with a blank wood type are skipped.
    """
    pattern: list[str] = []
    for piece in pieces:
        if not piece.has_wood_type:
            continue
        pattern.extend([piece.wood_type] * piece.quantity)
    return pattern


def brick_lay_rows(base: Sequence[str], rows: int) -> list[str]:
    """Repeat ``base`` once per row, reversing every odd (0-based) row."""
    result: list[str] = []
    reversed_base = list(reversed(base))
    for row in range(rows):
        result.extend(reversed_base if row % 2 else base)
    return result[: rows * len(base)]


class ConstructionGenerator:
    """Service that turns a stock list into design options.

    The generator is a pure function of its inputs: it never mutates the
    stock list and returns the same options for the same input. Degenerate
    stock (zero lengths, a segment wider than the stock) produces zero-sized
    options rather than errors; callers decide how to present those.
    """

    def __init__(self, config: ConstructionConfig | None = None) -> None:
        self.config = config or ConstructionConfig()

    def generate(self, pieces: Sequence[WoodStockPiece]) -> list[DesignOption]:
        """Generate face, edge and both end-grain options.

        Args:
            pieces: Stock on hand. Zero-quantity pieces contribute nothing.
                Pieces without a wood type add no strips and no width, but
                still count toward the maximum length and first-piece section.

        Returns:
            Exactly four options in the order face grain, edge grain,
            end grain from edge grain, end grain from face grain, or an
            empty list when no piece has a wood type.
        """
        if not any(piece.has_wood_type for piece in pieces):
            logger.debug("No stock piece has a wood type; nothing to generate")
            return []

        base_pattern = build_base_pattern(pieces)
        face = self.face_grain(pieces, base_pattern)
        edge = self.edge_grain(pieces, base_pattern)
        return [
            face,
            edge,
            self.end_grain_from_edge(pieces, edge),
            self.end_grain_from_face(pieces, face),
        ]

    def face_grain(
        self, pieces: Sequence[WoodStockPiece], base_pattern: list[str]
    ) -> DesignOption:
        """Glue strips on their narrow edge so the wide face shows."""
        thickness, width = self._first_piece_section(pieces)
        total_width = sum(piece.quantity * piece.width for piece in _typed(pieces))
        return DesignOption(
            construction_kind=ConstructionKind.FACE_GRAIN,
            dimensions=BoardDimensions(
                length=self._max_length(pieces),
                width=total_width,
                thickness=thickness,
            ),
            pattern=tuple(base_pattern),
            description=(
                f'Glue pieces along their narrow edges ({thickness}" side). '
                f'The {width}" faces create the width. '
                f"Shows {len(base_pattern)} strips. Wide face pattern."
            ),
        )

    def edge_grain(
        self, pieces: Sequence[WoodStockPiece], base_pattern: list[str]
    ) -> DesignOption:
        """Glue strips on their wide face so the narrow edge shows."""
        thickness, width = self._first_piece_section(pieces)
        total_width = sum(piece.quantity * piece.thickness for piece in _typed(pieces))
        return DesignOption(
            construction_kind=ConstructionKind.EDGE_GRAIN,
            dimensions=BoardDimensions(
                length=self._max_length(pieces),
                width=total_width,
                thickness=width,
            ),
            pattern=tuple(base_pattern),
            description=(
                f'Glue pieces along their wide faces ({width}" side). '
                f'The {thickness}" edges create the width. '
                f"Shows {len(base_pattern)} strips. Narrow edge pattern."
            ),
        )

    def end_grain_from_edge(
        self, pieces: Sequence[WoodStockPiece], edge: DesignOption
    ) -> DesignOption:
        """Cross-cut the edge-grain board; each slice contributes a stock width."""
        row_length = mean([piece.width for piece in _typed(pieces)])
        return self._end_grain(
            ConstructionKind.END_GRAIN_FROM_EDGE,
            pieces,
            source=edge,
            row_length=row_length,
            style="Narrow strip pattern.",
        )

    def end_grain_from_face(
        self, pieces: Sequence[WoodStockPiece], face: DesignOption
    ) -> DesignOption:
        """Cross-cut the face-grain board; each slice contributes a stock thickness."""
        row_length = mean([piece.thickness for piece in _typed(pieces)])
        return self._end_grain(
            ConstructionKind.END_GRAIN_FROM_FACE,
            pieces,
            source=face,
            row_length=row_length,
            style="Wide strip pattern.",
        )

    def _end_grain(
        self,
        kind: ConstructionKind,
        pieces: Sequence[WoodStockPiece],
        source: DesignOption,
        row_length: float,
        style: str,
    ) -> DesignOption:
        segment_width = self.config.segment_width
        cut_count = capacity(self._max_length(pieces), segment_width)
        kerf_loss = cut_count * self.config.kerf_width

        if cut_count == 0:
            logger.debug(
                "Segment width %s exceeds stock length; %s is infeasible",
                segment_width,
                kind.value,
            )
            thickness = 0.0
        else:
            # Each slice gives up its share of the total kerf
            thickness = segment_width - (kerf_loss / cut_count)

        return DesignOption(
            construction_kind=kind,
            dimensions=BoardDimensions(
                length=cut_count * row_length,
                width=source.dimensions.width,
                thickness=thickness,
            ),
            cut_count=cut_count,
            kerf_loss=kerf_loss,
            pattern=tuple(brick_lay_rows(source.pattern, cut_count)),
            description=(
                f"Take {source.construction_kind.value} board, cut into "
                f'{segment_width}" segments, rotate 90°, and reglue. '
                f"{style} Most knife-friendly!"
            ),
        )

    @staticmethod
    def _max_length(pieces: Sequence[WoodStockPiece]) -> float:
        return max((piece.length for piece in pieces), default=0.0)

    @staticmethod
    def _first_piece_section(pieces: Sequence[WoodStockPiece]) -> tuple[float, float]:
        """Thickness and width of the first stock piece.

        Mixed stock is approximated by the first piece; differing sizes are
        logged but not reconciled.
        """
        if not pieces:
            return 0.0, 0.0
        first = pieces[0]
        if any(
            p.thickness != first.thickness or p.width != first.width for p in pieces[1:]
        ):
            logger.debug(
                "Mixed stock sections; using first piece %sx%s",
                first.thickness,
                first.width,
            )
        return first.thickness, first.width
