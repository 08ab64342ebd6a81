"""Unit tests for same-length aggregation and roll-width splitting."""

import pytest

from carpets.domain import (
    IdSequence,
    Piece,
    aggregate_same_lengths,
    split_by_roll_width,
)


@pytest.fixture
def ids() -> IdSequence:
    return IdSequence()


class TestIdSequence:
    """Tests for the shared id counter."""

    def test_counts_up_from_start(self) -> None:
        ids = IdSequence(start=5)
        assert ids.next() == 5
        assert ids.next() == 6
        assert ids.value == 7

    def test_default_start(self) -> None:
        assert IdSequence().next() == 1000


class TestAggregateSameLengths:
    """Tests for aggregate_same_lengths."""

    def test_merges_pieces_with_equal_length(self, ids: IdSequence) -> None:
        """Widths of pieces with the same length should be summed."""
        pieces = [
            Piece.from_inches(1, 60, 120),
            Piece.from_inches(2, 84, 120),
        ]
        aggregated = aggregate_same_lengths(pieces, ids)

        assert len(aggregated) == 1
        assert aggregated[0].width_total == 144
        assert aggregated[0].length_total == 120

    def test_keeps_distinct_lengths_separate(self, ids: IdSequence) -> None:
        pieces = [
            Piece.from_inches(1, 60, 120),
            Piece.from_inches(2, 60, 100),
            Piece.from_inches(3, 30, 120),
        ]
        aggregated = aggregate_same_lengths(pieces, ids)

        assert [p.length_total for p in aggregated] == [120, 100]
        assert [p.width_total for p in aggregated] == [90, 60]

    def test_preserves_total_area(self, ids: IdSequence, house_pieces: list[Piece]) -> None:
        """Aggregation should never change the total area."""
        aggregated = aggregate_same_lengths(house_pieces, ids)
        assert sum(p.area for p in aggregated) == sum(p.area for p in house_pieces)

    def test_mints_fresh_ids(self, ids: IdSequence) -> None:
        pieces = [Piece.from_inches(1, 60, 120), Piece.from_inches(2, 60, 100)]
        aggregated = aggregate_same_lengths(pieces, ids)
        assert [p.id for p in aggregated] == [1000, 1001]

    def test_empty_input(self, ids: IdSequence) -> None:
        assert aggregate_same_lengths([], ids) == []


class TestSplitByRollWidth:
    """Tests for split_by_roll_width."""

    def test_narrow_piece_goes_to_needs(self, ids: IdSequence) -> None:
        split = split_by_roll_width([Piece.from_inches(1, 120, 120)], ids)
        assert split.standard == ()
        assert len(split.needs) == 1
        assert split.needs[0].width_total == 120
        assert split.standard_length == 0

    def test_exact_roll_width_is_standard(self, ids: IdSequence) -> None:
        """A piece exactly one roll wide should be standard, with no needs."""
        split = split_by_roll_width([Piece.from_inches(1, 144, 120)], ids)
        assert len(split.standard) == 1
        assert split.needs == ()
        assert split.standard_length == 120

    def test_wide_piece_splits_into_standard_and_remainder(self, ids: IdSequence) -> None:
        split = split_by_roll_width([Piece.from_inches(1, 200, 10)], ids)
        assert [p.width_total for p in split.standard] == [144]
        assert [p.width_total for p in split.needs] == [56]
        assert split.needs[0].length_total == 10
        assert split.standard_length == 10

    def test_multiple_of_roll_width(self, ids: IdSequence) -> None:
        """Exact multiples should give only standard pieces."""
        split = split_by_roll_width([Piece.from_inches(1, 288, 50)], ids)
        assert len(split.standard) == 2
        assert split.needs == ()
        assert split.standard_length == 100

    def test_custom_roll_width(self, ids: IdSequence) -> None:
        split = split_by_roll_width([Piece.from_inches(1, 200, 10)], ids, roll_width=180)
        assert [p.width_total for p in split.standard] == [180]
        assert [p.width_total for p in split.needs] == [20]

    def test_area_preserved(self, ids: IdSequence, house_pieces: list[Piece]) -> None:
        aggregated = aggregate_same_lengths(house_pieces, ids)
        split = split_by_roll_width(aggregated, ids)
        total = sum(p.area for p in split.standard) + sum(p.area for p in split.needs)
        assert total == sum(p.area for p in house_pieces)

    def test_needs_are_narrower_than_roll(self, ids: IdSequence, house_pieces: list[Piece]) -> None:
        split = split_by_roll_width(aggregate_same_lengths(house_pieces, ids), ids)
        assert all(0 < p.width_total < 144 for p in split.needs)
        assert all(p.width_total == 144 for p in split.standard)
