"""Unit tests for manual repositioning of needs pieces."""

import pytest

from carpets.domain import (
    CarpetResult,
    Piece,
    PlacedPiece,
    find_layout_errors,
    move_needs_piece,
    snap_position,
    summarize_usage,
)


def _placed(id: int, w: int, l: int, x: int, y: int) -> PlacedPiece:
    return PlacedPiece(piece=Piece.from_inches(id, w, l), x=x, y=y)


class TestSnapPosition:
    """Tests for snap_position."""

    def test_clamps_to_roll(self) -> None:
        piece = _placed(1, 40, 40, 0, 0)
        assert snap_position(piece, 200, -10, []) == (104, 0)
        assert snap_position(piece, -5, 50, []) == (0, 50)

    def test_snaps_to_left_roll_edge(self) -> None:
        piece = _placed(1, 40, 40, 0, 0)
        assert snap_position(piece, 3, 50, []) == (0, 50)

    def test_snaps_right_side_to_roll_edge(self) -> None:
        piece = _placed(1, 40, 40, 0, 0)
        x, _ = snap_position(piece, 101, 50, [])
        assert x == 104

    def test_snaps_to_neighbour_edges(self) -> None:
        piece = _placed(1, 40, 40, 0, 0)
        other = _placed(2, 50, 60, 0, 0)
        # Left side lands 2in from the other piece's right edge,
        # bottom lands 3in above its top edge
        assert snap_position(piece, 52, 63, [other]) == (50, 60)

    def test_threshold_is_exclusive(self) -> None:
        piece = _placed(1, 40, 40, 0, 0)
        other = _placed(2, 50, 60, 0, 0)
        assert snap_position(piece, 55, 100, [other]) == (55, 100)

    def test_closest_edge_wins(self) -> None:
        piece = _placed(1, 10, 10, 0, 0)
        near = _placed(2, 20, 20, 0, 100)  # right edge at 20
        far = _placed(3, 17, 20, 0, 200)  # right edge at 17
        x, _ = snap_position(piece, 19, 50, [near, far])
        assert x == 20


class TestFindLayoutErrors:
    """Tests for find_layout_errors."""

    def test_valid_layout(self) -> None:
        needs = [_placed(1, 50, 50, 0, 0), _placed(2, 50, 50, 50, 0)]
        assert find_layout_errors(needs) == []

    def test_overlap_reported(self) -> None:
        needs = [_placed(1, 50, 50, 0, 0), _placed(2, 50, 50, 25, 25)]
        errors = find_layout_errors(needs)
        assert errors == ["Pieces 1 and 2 overlap"]

    def test_off_roll_reported(self) -> None:
        errors = find_layout_errors([_placed(1, 50, 50, 100, 0)])
        assert len(errors) == 1
        assert "extends past the roll edge" in errors[0]


class TestMoveNeedsPiece:
    """Tests for move_needs_piece."""

    @pytest.fixture
    def result(self) -> CarpetResult:
        needs = (_placed(1, 100, 60, 0, 0), _placed(2, 44, 40, 100, 0))
        return summarize_usage((), needs, 0, 60, 50.0)

    def test_move_recalculates_length(self, result: CarpetResult) -> None:
        moved = move_needs_piece(result, 2, 100, 60)
        piece = next(p for p in moved.needs if p.id == 2)
        assert (piece.x, piece.y) == (100, 60)
        assert moved.needs_length == 100
        assert moved.total_length == 100

    def test_move_snaps_to_neighbour(self, result: CarpetResult) -> None:
        moved = move_needs_piece(result, 2, 100, 63)
        piece = next(p for p in moved.needs if p.id == 2)
        assert piece.y == 60

    def test_move_without_snap(self, result: CarpetResult) -> None:
        moved = move_needs_piece(result, 2, 100, 63, snap=False)
        piece = next(p for p in moved.needs if p.id == 2)
        assert piece.y == 63
        assert moved.needs_length == 103

    def test_move_still_clamps_without_snap(self, result: CarpetResult) -> None:
        moved = move_needs_piece(result, 2, 500, -4, snap=False)
        piece = next(p for p in moved.needs if p.id == 2)
        assert (piece.x, piece.y) == (100, 0)

    def test_unknown_piece_raises(self, result: CarpetResult) -> None:
        with pytest.raises(KeyError):
            move_needs_piece(result, 99, 0, 0)

    def test_other_pieces_untouched(self, result: CarpetResult) -> None:
        moved = move_needs_piece(result, 2, 100, 60)
        assert moved.needs[0] == result.needs[0]
        assert len(moved.needs) == 2

    def test_overlapping_move_is_allowed(self, result: CarpetResult) -> None:
        """Manual moves may overlap; the caller is told via layout errors."""
        moved = move_needs_piece(result, 2, 50, 20, snap=False)
        assert find_layout_errors(moved.needs, moved.roll_width) == ["Pieces 1 and 2 overlap"]
