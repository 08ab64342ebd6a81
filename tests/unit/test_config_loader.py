"""Unit tests for the carpet job schema, loader and adapter."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from carpets.application.config import (
    CarpetConfiguration,
    ConfigError,
    RoomConfig,
    config_to_options,
    config_to_packing,
    config_to_pieces,
    load_config,
    load_config_from_dict,
)


@pytest.fixture
def minimal_data() -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "rooms": [{"label": "LR", "width_feet": 11, "width_inches": 6, "length_feet": 13}],
    }


def _write(tmp_path: Path, data: Any) -> Path:
    path = tmp_path / "job.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestSchema:
    """Tests for the Pydantic schema models."""

    def test_minimal(self, minimal_data: dict[str, Any]) -> None:
        config = CarpetConfiguration.model_validate(minimal_data)
        assert config.rooms[0].width_inches == 6
        assert config.options.steps == 0
        assert config.packing.roll_width == 144
        assert config.packing.annealing.enabled is True

    def test_zero_width_room_rejected(self) -> None:
        with pytest.raises(ValidationError, match="width must be greater than zero"):
            RoomConfig(width_feet=0, length_feet=10)

    def test_unknown_field_rejected(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["colour"] = "beige"
        with pytest.raises(ValidationError):
            CarpetConfiguration.model_validate(minimal_data)

    def test_newer_minor_version_accepted(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["schema_version"] = "1.3"
        assert CarpetConfiguration.model_validate(minimal_data).schema_version == "1.3"

    def test_unsupported_major_version(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["schema_version"] = "2.0"
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            CarpetConfiguration.model_validate(minimal_data)

    def test_rooms_or_bulk_required(self) -> None:
        with pytest.raises(ValidationError, match="'rooms' or 'bulk'"):
            CarpetConfiguration.model_validate({"schema_version": "1.0"})

    def test_bulk_only(self) -> None:
        config = CarpetConfiguration.model_validate(
            {"schema_version": "1.0", "bulk": "LR 11.6x13.6"}
        )
        assert config.rooms == []

    def test_steps_limit(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["options"] = {"steps": 101}
        with pytest.raises(ValidationError):
            CarpetConfiguration.model_validate(minimal_data)


class TestLoadConfig:
    """Tests for file loading and error categories."""

    def test_load_valid(self, tmp_path: Path, minimal_data: dict[str, Any]) -> None:
        config = load_config(_write(tmp_path, minimal_data))
        assert config.rooms[0].label == "LR"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "job.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_validation_error_paths(self, tmp_path: Path) -> None:
        data = {
            "schema_version": "1.0",
            "rooms": [{"width_feet": -1, "length_feet": 10}],
        }
        with pytest.raises(ConfigError) as exc_info:
            load_config(_write(tmp_path, data))
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "rooms[0].width_feet"
        assert error.message.startswith("Invalid carpet job (")
        assert "rooms[0].width_feet" in error.message

    def test_load_from_dict(self, minimal_data: dict[str, Any]) -> None:
        assert load_config_from_dict(minimal_data).schema_version == "1.0"

    def test_load_from_dict_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "rooms": "nope"})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None


class TestAdapter:
    """Tests for schema to domain conversion."""

    def test_rooms_to_pieces(self, minimal_data: dict[str, Any]) -> None:
        pieces = config_to_pieces(load_config_from_dict(minimal_data))
        assert len(pieces) == 1
        assert pieces[0].id == 1
        assert (pieces[0].width_total, pieces[0].length_total) == (138, 156)

    def test_bulk_continues_numbering(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["bulk"] = "BR 10x12, Den 9x9"
        pieces = config_to_pieces(load_config_from_dict(minimal_data))
        assert [p.id for p in pieces] == [1, 2, 3]
        assert [p.label for p in pieces] == ["LR", "BR", "Den"]

    def test_bad_bulk_entry_fails(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["bulk"] = "BR 10x12, oops"
        with pytest.raises(ConfigError) as exc_info:
            config_to_pieces(load_config_from_dict(minimal_data))
        assert exc_info.value.error_type == "parse"
        assert exc_info.value.details == [{"entry": "oops", "message": "No dimensions found"}]

    def test_options(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["options"] = {"add_slippage": True, "steps": 4, "slippage_inches": 3}
        options = config_to_options(load_config_from_dict(minimal_data))
        assert options.add_slippage is True
        assert options.steps == 4
        assert options.slippage_inches == 3

    def test_packing(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["packing"] = {
            "roll_width": 180,
            "annealing": {"max_iterations": 10, "seed": 3},
        }
        packing = config_to_packing(load_config_from_dict(minimal_data))
        assert packing.roll_width == 180
        assert packing.annealing.max_iterations == 10
        assert packing.annealing.seed == 3

    def test_seed_override(self, minimal_data: dict[str, Any]) -> None:
        minimal_data["packing"] = {"annealing": {"seed": 3}}
        config = load_config_from_dict(minimal_data)
        assert config_to_packing(config, seed=9).annealing.seed == 9
        assert config_to_packing(config.packing).annealing.seed == 3
