"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid job files pass validation
- Invalid job files produce errors
- Suspicious bulk entries are reported as warnings
- Exit codes are correct
"""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from carpets.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


def _write(tmp_path: Path, data: Any, name: str = "job.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_job(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            {
                "schema_version": "1.0",
                "rooms": [{"label": "LR", "width_feet": 11, "length_feet": 13}],
                "bulk": "BR 10x12",
            },
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert "Validation passed. 2 room(s) ready." in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(tmp_path, '{"schema_version": "1.0",')
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_schema_error(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            {"schema_version": "1.0", "rooms": [{"width_feet": 10, "length_feet": 0}]},
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "rooms[0]" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            {"schema_version": "1.0", "bulk": "10x10", "pattern": "berber"},
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "pattern" in result.output

    def test_bad_bulk_entry(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(tmp_path, {"schema_version": "1.0", "bulk": "10x10, 10+12"})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Unrecognised separator" in result.output

    def test_oversized_bulk_entry_warns(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(tmp_path, {"schema_version": "1.0", "bulk": "Barn 60x10"})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Validation passed with 1 warning(s)" in result.output
