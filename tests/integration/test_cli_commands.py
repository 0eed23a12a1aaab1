"""Integration tests for the cuttingboards CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cuttingboards.application import CalculateRequirementsCommand, RequirementsOutput
from cuttingboards.cli.main import app


runner = CliRunner()

MAPLE = "Maple:0.75x2x24:10"


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    path = tmp_path / "board.json"
    path.write_text(
        json.dumps(
            {
                "schema_version": "1.1",
                "stock": [
                    {"wood_type": "Walnut", "quantity": 20},
                    {"wood_type": "Maple", "quantity": 3},
                ],
                "desired_board": {"width": 20, "length": 16},
                "pattern": {"key": "woven-2color"},
            }
        ),
        encoding="utf-8",
    )
    return path


class TestDesignsCommand:
    """Tests for 'cuttingboards designs'."""

    def test_text_output(self) -> None:
        result = runner.invoke(app, ["designs", "--stock", MAPLE])
        assert result.exit_code == 0
        assert "DESIGN OPTIONS" in result.output
        assert "END GRAIN (FROM FACE GRAIN)" in result.output

    def test_json_output(self) -> None:
        result = runner.invoke(app, ["designs", "-s", MAPLE, "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[1]["dimensions"]["thickness"] == 2.0
        assert data[2]["cutCount"] == 12

    def test_segment_and_kerf_options(self) -> None:
        result = runner.invoke(
            app,
            ["designs", "-s", MAPLE, "--segment-width", "3", "--kerf", "0", "-f", "json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[2]["cutCount"] == 8
        assert data[2]["kerfLoss"] == 0

    def test_negative_segment_rejected(self) -> None:
        result = runner.invoke(app, ["designs", "-s", MAPLE, "--segment-width", "-1"])
        assert result.exit_code == 1

    def test_oversized_stock_rejected(self) -> None:
        result = runner.invoke(app, ["designs", "-s", "Maple:0.75x2x100000:10"])
        assert result.exit_code == 1
        assert "length cannot exceed" in result.output

    def test_tiny_segment_rejected(self) -> None:
        result = runner.invoke(app, ["designs", "-s", MAPLE, "--segment-width", "0.001"])
        assert result.exit_code == 1

    def test_malformed_accessories_in_options_file(self, tmp_path: Path) -> None:
        options_file = tmp_path / "options.json"
        runner.invoke(app, ["designs", "-s", MAPLE, "-f", "json", "-o", str(options_file)])
        options = json.loads(options_file.read_text(encoding="utf-8"))
        options[0]["accessorySettings"] = {"handleHoles": "two"}
        options_file.write_text(json.dumps(options), encoding="utf-8")
        result = runner.invoke(app, ["regenerate", "--options", str(options_file), "-s", MAPLE])
        assert result.exit_code == 1
        assert "Error reading options" in result.output

    def test_bad_stock_spec(self) -> None:
        result = runner.invoke(app, ["designs", "-s", "Maple:oops"])
        assert result.exit_code == 1
        assert "Invalid stock spec" in result.output

    def test_stock_required(self) -> None:
        result = runner.invoke(app, ["designs"])
        assert result.exit_code == 1

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["designs", "-s", MAPLE, "-f", "xml"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_from_project_file(self, project_file: Path) -> None:
        result = runner.invoke(app, ["designs", "-c", str(project_file), "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["dimensions"]["width"] == 46.0

    def test_missing_project_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["designs", "-c", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_write_output_file(self, tmp_path: Path) -> None:
        out = tmp_path / "out" / "options.json"
        result = runner.invoke(app, ["designs", "-s", MAPLE, "-f", "json", "-o", str(out)])
        assert result.exit_code == 0
        assert len(json.loads(out.read_text(encoding="utf-8"))) == 4


class TestRegenerateCommand:
    """Tests for 'cuttingboards regenerate'."""

    def test_round_trip(self, tmp_path: Path) -> None:
        options_file = tmp_path / "options.json"
        runner.invoke(
            app,
            ["designs", "-s", "Maple:0.75x2x24:5", "-s", "Walnut:0.75x2x24:5",
             "-f", "json", "-o", str(options_file)],
        )
        original = json.loads(options_file.read_text(encoding="utf-8"))

        result = runner.invoke(
            app,
            ["regenerate", "--options", str(options_file),
             "-s", "Maple:0.75x2x24:5", "-s", "Walnut:0.75x2x24:5",
             "--seed", "42", "-f", "json"],
        )
        assert result.exit_code == 0
        regenerated = json.loads(result.output)
        for before, after in zip(original, regenerated):
            assert after["dimensions"] == before["dimensions"]
            assert sorted(after["pattern"]) == sorted(before["pattern"])

    def test_malformed_options_file(self, tmp_path: Path) -> None:
        options_file = tmp_path / "options.json"
        options_file.write_text(json.dumps({"not": "a list"}), encoding="utf-8")
        result = runner.invoke(app, ["regenerate", "--options", str(options_file), "-s", MAPLE])
        assert result.exit_code == 1
        assert "Error reading options" in result.output


class TestRequirementsCommand:
    """Tests for 'cuttingboards requirements'."""

    def test_plain_estimate(self) -> None:
        result = runner.invoke(
            app,
            ["requirements", "-s", "Maple:0.75x2x24:5", "-w", "16", "-l", "14"],
        )
        assert result.exit_code == 0
        assert "SHORT 2" in result.output
        assert "NEED MORE STOCK" in result.output

    def test_json_estimate(self) -> None:
        result = runner.invoke(
            app,
            ["requirements", "-s", "Maple:0.75x2x24:5", "-w", "16", "-l", "14", "-f", "json"],
        )
        data = json.loads(result.output)
        assert data["stripsNeeded"] == 7
        assert data["perWoodType"][0]["boardsNeeded"] == 7

    def test_pattern_from_project(self, project_file: Path) -> None:
        result = runner.invoke(app, ["requirements", "-c", str(project_file), "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["patternInfo"]["name"] == "2 Color Woven Pattern"
        assert [r["woodType"] for r in data["perWoodType"]] == ["Walnut", "Maple"]

    def test_pattern_selection_error(self) -> None:
        result = runner.invoke(app, ["requirements", "-s", MAPLE, "-p", "woven-2color"])
        assert result.exit_code == 0
        assert "Pattern cannot be calculated" in result.output

    def test_unknown_pattern(self) -> None:
        result = runner.invoke(app, ["requirements", "-s", MAPLE, "-p", "chevron"])
        assert result.exit_code == 1
        assert "chevron" in result.output

    def test_missing_report_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A command result without a report is an error, not a crash."""
        monkeypatch.setattr(
            CalculateRequirementsCommand,
            "execute",
            lambda self, *args, **kwargs: RequirementsOutput(),
        )
        result = runner.invoke(app, ["requirements", "-s", MAPLE])
        assert result.exit_code == 1
        assert "no requirement report" in result.output

    def test_negative_width(self) -> None:
        result = runner.invoke(app, ["requirements", "-s", MAPLE, "-w", "-5"])
        assert result.exit_code == 1
        assert "Desired width cannot be negative" in result.output


class TestPatternsCommand:
    def test_lists_patterns(self) -> None:
        result = runner.invoke(app, ["patterns"])
        assert result.exit_code == 0
        assert "woven-2color-thin" in result.output
