"""Output formatters for design options and stock reports."""

from __future__ import annotations

import json
from typing import Any

from cuttingboards.domain import DesignOption, StockRequirementReport


def _abbreviate(wood_type: str, width: int = 3) -> str:
    return wood_type.strip()[:width].upper().ljust(width)


class DesignOptionFormatter:
    """Formats design options as a summary table plus pattern previews.

    End-grain patterns are shown row by row; the number of rows printed is
    capped by ``max_rows``.
    """

    def __init__(self, max_rows: int = 6) -> None:
        self._max_rows = max_rows

    def format(self, options: list[DesignOption]) -> str:
        if not options:
            return "No design options. Add at least one stock piece with a wood type."

        lines = [
            "DESIGN OPTIONS",
            "=" * 78,
            f"{'Construction':<30} {'Length':<9} {'Width':<9} {'Thick':<8} {'Cuts':<5} {'Kerf'}",
            "-" * 78,
        ]
        for option in options:
            dims = option.dimensions
            lines.append(
                f"{option.construction_kind.title:<30} {dims.length:<9.3f} "
                f"{dims.width:<9.3f} {dims.thickness:<8.3f} "
                f"{option.cut_count:<5} {option.kerf_loss:.3f}"
            )
        lines.append("-" * 78)

        for option in options:
            lines.append("")
            lines.extend(self.format_pattern(option))
        return "\n".join(lines)

    def format_pattern(self, option: DesignOption) -> list[str]:
        """Render one option's gluing pattern as text lines."""
        lines = [option.construction_kind.title]
        if option.description:
            lines.append(f"  {option.description}")
        if option.dimensions.length <= 0 or not option.pattern:
            lines.append("  (infeasible - not enough stock for this construction)")
            return lines

        if not option.construction_kind.is_end_grain:
            lines.append("  " + " ".join(_abbreviate(w) for w in option.pattern))
            return lines

        row_size = len(option.pattern) // option.cut_count if option.cut_count else 0
        if row_size == 0:
            lines.append("  " + " ".join(_abbreviate(w) for w in option.pattern))
            return lines

        rows = [
            option.pattern[i : i + row_size]
            for i in range(0, len(option.pattern), row_size)
        ]
        for row in rows[: self._max_rows]:
            lines.append("  " + " ".join(_abbreviate(w) for w in row))
        if len(rows) > self._max_rows:
            lines.append(f"  ... {len(rows) - self._max_rows} more rows")
        return lines


class RequirementReportFormatter:
    """Formats a stock requirement report as a table."""

    def format(self, report: StockRequirementReport) -> str:
        lines = [
            "STOCK REQUIREMENTS",
            "=" * 64,
            f"Board area: {report.total_area:.1f} sq in ({report.total_area / 144:.2f} sq ft)",
        ]

        if report.pattern_error:
            lines.append("")
            lines.append(f"Pattern cannot be calculated: {report.pattern_error}")
            return "\n".join(lines)

        info = report.pattern_info
        if info is not None:
            lines.extend(
                [
                    f"Pattern: {info.name}",
                    f"  Cubes: {info.squares_wide} x {info.squares_long} = {info.total_squares}",
                    f"  Main pieces: {info.main_pieces_needed}",
                    f"  Accent pieces: {info.accent_pieces_needed}",
                ]
            )
        else:
            lines.append(f"Strips needed: {report.strips_needed}")

        lines.extend(
            [
                "-" * 64,
                f"{'Wood':<20} {'Needed':<10} {'On hand':<10} {'Status'}",
                "-" * 64,
            ]
        )
        for req in report.per_wood_type:
            status = "OK" if req.sufficient else f"SHORT {req.boards_needed - req.boards_available}"
            lines.append(
                f"{req.wood_type or '(unnamed)':<20} {req.boards_needed:<10} "
                f"{req.boards_available:<10} {status}"
            )
        lines.append("-" * 64)
        lines.append(
            f"{'TOTAL':<20} {report.total_boards_needed:<10} "
            f"{report.total_boards_available:<10} "
            f"{'ENOUGH STOCK' if report.overall_sufficient else 'NEED MORE STOCK'}"
        )
        return "\n".join(lines)


class JsonExporter:
    """Serializes design options and reports to JSON."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def export_options(self, options: list[DesignOption]) -> str:
        return json.dumps([option.to_dict() for option in options], indent=self._indent)

    def export_report(self, report: StockRequirementReport) -> str:
        return json.dumps(report_to_dict(report), indent=self._indent)


def report_to_dict(report: StockRequirementReport) -> dict[str, Any]:
    data: dict[str, Any] = {
        "totalArea": report.total_area,
        "stripsNeeded": report.strips_needed,
        "perWoodType": [
            {
                "woodType": req.wood_type,
                "boardsNeeded": req.boards_needed,
                "boardsAvailable": req.boards_available,
                "sufficient": req.sufficient,
                "color": req.color,
            }
            for req in report.per_wood_type
        ],
        "totalBoardsNeeded": report.total_boards_needed,
        "totalBoardsAvailable": report.total_boards_available,
        "overallSufficient": report.overall_sufficient,
    }
    if report.pattern_info is not None:
        info = report.pattern_info
        data["patternInfo"] = {
            "name": info.name,
            "squaresWide": info.squares_wide,
            "squaresLong": info.squares_long,
            "totalSquares": info.total_squares,
            "mainPiecesNeeded": info.main_pieces_needed,
            "accentPiecesNeeded": info.accent_pieces_needed,
        }
    if report.pattern_error is not None:
        data["patternError"] = report.pattern_error
    return data
