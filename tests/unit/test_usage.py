"""Unit tests for input augmentation and usage synthesis."""

import pytest

from carpets.domain import (
    CarpetOptions,
    Piece,
    PlacedPiece,
    augment_pieces,
    recalculate,
    summarize_usage,
)
from carpets.domain.services import needs_length_of, used_square_feet


class TestAugmentPieces:
    """Tests for stair pieces and slippage."""

    def test_no_options_returns_input(self) -> None:
        pieces = [Piece.from_inches(1, 120, 120)]
        used, packing = augment_pieces(pieces, CarpetOptions())
        assert used == pieces
        assert packing == pieces

    def test_steps_add_stair_pieces(self) -> None:
        used, packing = augment_pieces([], CarpetOptions(steps=3))
        assert len(used) == 3
        assert all((p.width_total, p.length_total) == (48, 24) for p in used)
        assert [p.id for p in used] == [9000, 9001, 9002]
        assert used[0].label == "Step"
        assert packing == used

    def test_slippage_grows_packing_pieces_only(self) -> None:
        pieces = [Piece.from_inches(1, 120, 120)]
        used, packing = augment_pieces(pieces, CarpetOptions(add_slippage=True))
        assert used[0].width_total == 120
        assert packing[0].width_total == 124
        assert packing[0].length_total == 124

    def test_slippage_applies_to_steps(self) -> None:
        _, packing = augment_pieces([], CarpetOptions(add_slippage=True, steps=1))
        assert (packing[0].width_total, packing[0].length_total) == (52, 28)

    def test_custom_slippage(self) -> None:
        pieces = [Piece.from_inches(1, 100, 100)]
        _, packing = augment_pieces(
            pieces, CarpetOptions(add_slippage=True, slippage_inches=6)
        )
        assert packing[0].width_total == 106


class TestSummarizeUsage:
    """Tests for summarize_usage."""

    def test_single_piece_totals(self) -> None:
        """A 10'x10' room on a 12' roll wastes 20 sq ft."""
        piece = Piece.from_inches(1, 120, 120)
        result = summarize_usage(
            standard=(),
            needs=(PlacedPiece(piece, 0, 0),),
            standard_length=0,
            needs_length=120,
            used_sq_ft=100.0,
        )
        assert result.total_length == 120
        assert result.total_sq_ft == pytest.approx(120.0)
        assert result.total_sq_yd == pytest.approx(120.0 / 9)
        assert result.waste_sq_ft == pytest.approx(20.0)
        assert result.waste_percent == pytest.approx(16.6667, rel=1e-3)

    def test_zero_total_has_zero_waste_percent(self) -> None:
        result = summarize_usage((), (), 0, 0, 0.0)
        assert result.total_sq_ft == 0
        assert result.waste_percent == 0.0

    def test_carries_metadata(self) -> None:
        result = summarize_usage((), (), 10, 0, 5.0, is_flipped=True, strategy="x")
        assert result.is_flipped is True
        assert result.strategy == "x"
        assert result.roll_width == 144


class TestHelpers:
    """Tests for the small usage helpers."""

    def test_used_square_feet(self) -> None:
        pieces = [Piece.from_inches(1, 120, 120), Piece.from_inches(2, 12, 12)]
        assert used_square_feet(pieces) == pytest.approx(101.0)

    def test_needs_length_of(self) -> None:
        needs = [
            PlacedPiece(Piece.from_inches(1, 50, 40), 0, 0),
            PlacedPiece(Piece.from_inches(2, 50, 30), 0, 40),
        ]
        assert needs_length_of(needs) == 70
        assert needs_length_of([]) == 0


class TestRecalculate:
    """Tests for recalculate after manual edits."""

    def test_needs_length_follows_geometry(self) -> None:
        piece = Piece.from_inches(1, 60, 60)
        original = summarize_usage((), (PlacedPiece(piece, 0, 0),), 0, 60, 25.0)

        updated = recalculate(original, [PlacedPiece(piece, 0, 40)])

        assert updated.needs_length == 100
        assert updated.total_length == 100
        assert updated.used_sq_ft == 25.0
        assert updated.waste_sq_ft == pytest.approx(100 - 25.0)

    def test_without_edits_is_stable(self) -> None:
        piece = Piece.from_inches(1, 60, 60)
        original = summarize_usage((), (PlacedPiece(piece, 0, 0),), 0, 60, 25.0)
        assert recalculate(original) == original

    def test_standard_pieces_carried_over(self) -> None:
        standard = (Piece.from_inches(1, 144, 50),)
        original = summarize_usage(standard, (), 50, 0, 50.0)
        updated = recalculate(original, [PlacedPiece(Piece.from_inches(2, 10, 10), 0, 0)])
        assert updated.standard == standard
        assert updated.total_length == 60
