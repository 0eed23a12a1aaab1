"""Unit tests for project file loading and adapters."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cuttingboards.application.config import (
    ConfigError,
    DesignerConfiguration,
    config_to_construction_config,
    config_to_desired_board,
    config_to_pattern,
    config_to_stock,
    load_config,
    load_config_from_dict,
)


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "project.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


PROJECT = {
    "schema_version": "1.1",
    "stock": [
        {"wood_type": "Walnut", "thickness": 0.75, "width": 2, "length": 24, "quantity": 12},
        {"wood_type": "Maple", "quantity": 6, "color_override": "#FFEEDD"},
    ],
    "desired_board": {"width": 18, "length": 12},
    "settings": {"segment_width": 1.5, "kerf_width": 0.1},
    "pattern": {"key": "woven-2color", "main_index": 1, "accent_index": 0},
}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_valid_project(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, PROJECT))
        assert isinstance(config, DesignerConfiguration)
        assert len(config.stock) == 2
        assert config.stock[1].thickness == 0.75
        assert config.desired_board.thickness == 1.5

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_validation_error_paths(self, tmp_path: Path) -> None:
        data = {"schema_version": "1.0", "stock": [{"wood_type": "Oak", "quantity": -2}]}
        with pytest.raises(ConfigError) as exc_info:
            load_config(_write(tmp_path, data))
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "stock[0].quantity"
        assert "stock[0].quantity" in str(error)

    def test_unknown_field_rejected(self, tmp_path: Path) -> None:
        data = {"schema_version": "1.0", "glue": "titebond"}
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, data))

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "2.0"})
        assert "Unsupported schema version" in str(exc_info.value)

    def test_newer_minor_version_accepted(self) -> None:
        assert load_config_from_dict({"schema_version": "1.7"}).schema_version == "1.7"

    def test_unknown_pattern_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Unknown woven pattern"):
            load_config_from_dict(
                {"schema_version": "1.1", "pattern": {"key": "chevron"}}
            )

    @pytest.mark.parametrize(
        "settings",
        [{"segment_width": 0.01}, {"segment_width": 30}, {"kerf_width": 0.75}],
    )
    def test_saw_settings_bounded(self, settings: dict) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "settings": settings})
        assert exc_info.value.details[0]["path"].startswith("settings.")

    def test_bad_color_override(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict(
                {"schema_version": "1.0", "stock": [{"color_override": "brown"}]}
            )


class TestConfigAdapters:
    """Tests for converting a project into DTOs and domain objects."""

    @pytest.fixture
    def config(self) -> DesignerConfiguration:
        return load_config_from_dict(PROJECT)

    def test_stock(self, config: DesignerConfiguration) -> None:
        stock = config_to_stock(config)
        assert [s.wood_type for s in stock] == ["Walnut", "Maple"]
        assert stock[0].quantity == 12
        assert stock[1].color_override == "#FFEEDD"

    def test_desired_board(self, config: DesignerConfiguration) -> None:
        desired = config_to_desired_board(config)
        assert (desired.width, desired.length, desired.thickness) == (18, 12, 1.5)

    def test_construction_config(self, config: DesignerConfiguration) -> None:
        construction = config_to_construction_config(config)
        assert construction.segment_width == 1.5
        assert construction.kerf_width == 0.1

    def test_pattern(self, config: DesignerConfiguration) -> None:
        pattern, main, accent = config_to_pattern(config)
        assert pattern is not None and pattern.key == "woven-2color"
        assert (main, accent) == (1, 0)

    def test_no_pattern(self) -> None:
        config = load_config_from_dict({"schema_version": "1.0"})
        assert config_to_pattern(config) == (None, 0, 1)
