"""Tests for report formatters and the JSON exporter."""

import json

import pytest

from carpets.domain import (
    CarpetResult,
    HardwoodResult,
    Piece,
    PlacedPiece,
    summarize_usage,
)
from carpets.infrastructure import (
    BulkParseFormatter,
    CarpetReportFormatter,
    HardwoodReportFormatter,
    JsonExporter,
    RollDiagramFormatter,
    parse_bulk_measurements,
)


@pytest.fixture
def result() -> CarpetResult:
    """A plan with one standard piece and two packed needs pieces."""
    standard = (Piece.from_inches(1001, 144, 60),)
    needs = (
        PlacedPiece(Piece.from_inches(1, 100, 80, label="LR"), 0, 0),
        PlacedPiece(Piece.from_inches(2, 44, 40), 100, 0),
    )
    return summarize_usage(
        standard, needs, 60, 80, used_sq_ft=110.0, strategy="shelf_loose"
    )


class TestCarpetReportFormatter:
    """Tests for the text report."""

    def test_sections(self, result: CarpetResult) -> None:
        output = CarpetReportFormatter().format(result)
        assert "CARPET ROLL PLAN" in output
        assert "STANDARD (full width)" in output
        assert "NEEDS (packed)" in output
        assert "AREA" in output

    def test_totals(self, result: CarpetResult) -> None:
        output = CarpetReportFormatter().format(result)
        assert "Total length:    11'8\"" in output
        assert "140.00 sq ft" in output
        assert "Packing:         shelf_loose" in output

    def test_needs_positions_and_names(self, result: CarpetResult) -> None:
        output = CarpetReportFormatter().format(result)
        assert "LR" in output
        assert "#2" in output
        assert 'x=100" y=0"' in output

    def test_rotation_noted(self, result: CarpetResult) -> None:
        flipped = summarize_usage((), result.needs, 0, 80, 50.0, is_flipped=True)
        assert "rotated 90 degrees" in CarpetReportFormatter().format(flipped)

    def test_empty(self) -> None:
        assert CarpetReportFormatter().format(CarpetResult()) == "No pieces to cut."


class TestRollDiagramFormatter:
    """Tests for the ASCII needs diagram."""

    def test_borders_and_width(self, result: CarpetResult) -> None:
        lines = RollDiagramFormatter(width=74).format(result).splitlines()
        assert lines[0].startswith("Needs layout")
        assert lines[1] == "+" + "-" * 72 + "+"
        assert all(len(line) == 74 for line in lines[1:])

    def test_label_drawn(self, result: CarpetResult) -> None:
        assert "LR" in RollDiagramFormatter().format(result)

    def test_no_needs(self) -> None:
        standard_only = summarize_usage((Piece.from_inches(1, 144, 60),), (), 60, 0, 60.0)
        assert RollDiagramFormatter().format(standard_only) == "No needs pieces to diagram."


class TestJsonExporter:
    """Tests for JSON export."""

    def test_valid_json(self, result: CarpetResult) -> None:
        data = json.loads(JsonExporter().export(result))
        assert data["total_length"] == 140
        assert data["standard_length"] == 60
        assert data["needs_length"] == 80
        assert data["strategy"] == "shelf_loose"
        assert data["is_flipped"] is False

    def test_pieces(self, result: CarpetResult) -> None:
        data = JsonExporter().to_dict(result)
        assert data["standard"] == [{"id": 1001, "label": "", "width": 144, "length": 60}]
        assert data["needs"][0] == {
            "id": 1,
            "label": "LR",
            "width": 100,
            "length": 80,
            "x": 0,
            "y": 0,
        }

    def test_areas_rounded(self, result: CarpetResult) -> None:
        data = JsonExporter().to_dict(result)
        assert data["total_sq_ft"] == 140.0
        assert data["waste_sq_ft"] == 30.0
        assert data["waste_percent"] == pytest.approx(21.43, abs=0.01)


class TestHardwoodReportFormatter:
    def test_format(self) -> None:
        result = HardwoodResult(
            total_sq_ft=100.0, waste_sq_ft=7.0, total_needed=107.0, boxes_needed=5
        )
        output = HardwoodReportFormatter().format(result)
        assert "HARDWOOD ESTIMATE" in output
        assert "Boxes:        5" in output
        assert "Waste (7%)" in output


class TestBulkParseFormatter:
    """Tests for the bulk-entry preview."""

    def test_summary(self) -> None:
        parsed = parse_bulk_measurements("LR 11.6x13.6, bad, 60x10")
        output = BulkParseFormatter().format(parsed)
        assert "2 valid, 1 error(s), 1 warning(s)" in output
        assert "No dimensions found" in output
        assert "11'6\" x 13'6\"" in output

    def test_no_entries(self) -> None:
        assert BulkParseFormatter().format(parse_bulk_measurements("")) == "No entries."
