"""Unit tests for the hardwood box estimate."""

import pytest

from carpets.domain import Piece, calculate_hardwood


class TestCalculateHardwood:
    """Tests for calculate_hardwood."""

    def test_default_waste_and_box_size(self) -> None:
        """100 sq ft plus 7% waste needs 5 boxes of 25 sq ft."""
        result = calculate_hardwood([Piece.from_inches(1, 120, 120)])
        assert result.total_sq_ft == pytest.approx(100.0)
        assert result.waste_sq_ft == pytest.approx(7.0)
        assert result.total_needed == pytest.approx(107.0)
        assert result.boxes_needed == 5
        assert result.waste_percent == 7.0
        assert result.box_sq_ft == 25.0

    def test_exact_fit_does_not_round_up(self) -> None:
        result = calculate_hardwood(
            [Piece.from_inches(1, 120, 120)], waste_percent=0, box_sq_ft=25
        )
        assert result.boxes_needed == 4

    def test_multiple_rooms(self) -> None:
        pieces = [Piece.from_inches(1, 120, 120), Piece.from_inches(2, 60, 120)]
        result = calculate_hardwood(pieces, waste_percent=10, box_sq_ft=20)
        assert result.total_sq_ft == pytest.approx(150.0)
        assert result.total_needed == pytest.approx(165.0)
        assert result.boxes_needed == 9

    def test_no_rooms(self) -> None:
        result = calculate_hardwood([])
        assert result.total_sq_ft == 0
        assert result.boxes_needed == 0

    def test_invalid_box_size(self) -> None:
        with pytest.raises(ValueError, match="Box coverage"):
            calculate_hardwood([Piece.from_inches(1, 12, 12)], box_sq_ft=0)

    def test_negative_waste(self) -> None:
        with pytest.raises(ValueError, match="Waste percentage"):
            calculate_hardwood([Piece.from_inches(1, 12, 12)], waste_percent=-1)
