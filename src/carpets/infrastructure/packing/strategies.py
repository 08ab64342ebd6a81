"""Packing heuristics for needs pieces.

Each strategy places narrower-than-roll pieces across the roll width
without rotating them, trying to keep the consumed roll length short.
Two families are used:

- Shelf packing: horizontal bands, pieces left to right within a band.
- Height-map packing: per-column tops, pieces dropped to the lowest
  position their footprint allows.

All working state is allocated per call, so a strategy instance can be
reused across calculations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from carpets.contracts.strategies import PackingStrategy
from carpets.domain.value_objects import Piece, PlacedPiece

from .models import HeightMap, PackingConfig, StrategyResult, _Shelf

logger = logging.getLogger(__name__)


def _by_length_then_width(piece: Piece) -> tuple[int, int]:
    return (-piece.length_total, -piece.width_total)


def _by_length(piece: Piece) -> int:
    return -piece.length_total


def _by_area(piece: Piece) -> int:
    return -piece.area


class ShelfPackingStrategy:
    """Shelf packing with a bounded height surplus.

    Pieces are sorted longest first. Each piece goes on the existing shelf
    whose height exceeds the piece length by the smallest surplus (within
    ``tolerance``) and that still has room across the roll; otherwise a
    new shelf opens on top of the highest one.

    Attributes:
        name: Strategy name.
        tolerance: Maximum shelf height surplus in inches.
    """

    def __init__(
        self,
        name: str,
        tolerance: int,
        sort_key: Callable[[Piece], object],
        roll_width: int,
    ) -> None:
        self.name = name
        self.tolerance = tolerance
        self._sort_key = sort_key
        self._roll_width = roll_width

    def pack(self, pieces: Sequence[Piece]) -> StrategyResult:
        if not pieces:
            return StrategyResult.empty(self.name)

        shelves: list[_Shelf] = []
        placements: list[PlacedPiece] = []

        for piece in sorted(pieces, key=self._sort_key):
            shelf = self._best_shelf(piece, shelves)
            if shelf is None:
                y = shelves[-1].top if shelves else 0
                shelf = _Shelf(y=y, height=piece.length_total)
                shelves.append(shelf)
            placements.append(shelf.place(piece))

        return StrategyResult(
            name=self.name,
            placements=tuple(placements),
            max_length=shelves[-1].top,
        )

    def _best_shelf(self, piece: Piece, shelves: list[_Shelf]) -> _Shelf | None:
        best: _Shelf | None = None
        best_surplus = 0
        for shelf in shelves:
            surplus = shelf.height - piece.length_total
            if surplus < 0 or surplus > self.tolerance:
                continue
            if shelf.used_width + piece.width_total > self._roll_width:
                continue
            if best is None or surplus < best_surplus:
                best, best_surplus = shelf, surplus
                if surplus == 0:
                    break  # Exact fit
        return best


class LengthGroupingStrategy:
    """Group large pieces of similar length into shared bands.

    Large pieces (either side at least ``large_piece_threshold``) whose
    lengths are within ``length_group_tolerance`` and whose combined width
    fits the roll are laid side by side at the lowest position spanning
    the whole group. Small pieces then fill in individually.
    """

    name = "length_grouping"

    def __init__(self, config: PackingConfig) -> None:
        self.config = config

    def pack(self, pieces: Sequence[Piece]) -> StrategyResult:
        if not pieces:
            return StrategyResult.empty(self.name)

        threshold = self.config.large_piece_threshold
        large = [
            p for p in pieces if p.width_total >= threshold or p.length_total >= threshold
        ]
        small = [
            p for p in pieces if p.width_total < threshold and p.length_total < threshold
        ]

        height_map = HeightMap(self.config.roll_width)
        placements: list[PlacedPiece] = []

        for group in self._group_by_length(sorted(large, key=_by_length_then_width)):
            group_width = sum(piece.width_total for piece in group)
            x, y = height_map.find_lowest(group_width)
            for piece in group:
                placements.append(height_map.place(piece, x, y))
                x += piece.width_total

        for piece in sorted(small, key=_by_area):
            placements.append(height_map.place_lowest(piece))

        return StrategyResult(
            name=self.name,
            placements=tuple(placements),
            max_length=height_map.max_height,
        )

    def _group_by_length(self, pieces: list[Piece]) -> list[list[Piece]]:
        """Greedily group pieces against the first (longest) member."""
        groups: list[list[Piece]] = []
        remaining = list(pieces)

        while remaining:
            first = remaining.pop(0)
            group = [first]
            width = first.width_total
            leftover: list[Piece] = []

            for piece in remaining:
                close = (
                    abs(piece.length_total - first.length_total)
                    <= self.config.length_group_tolerance
                )
                if close and width + piece.width_total <= self.config.roll_width:
                    group.append(piece)
                    width += piece.width_total
                else:
                    leftover.append(piece)

            groups.append(group)
            remaining = leftover

        return groups


class FirstFitByAreaStrategy:
    """First-fit decreasing by area on the height map."""

    name = "first_fit_area"

    def __init__(self, config: PackingConfig) -> None:
        self.config = config

    def pack(self, pieces: Sequence[Piece]) -> StrategyResult:
        if not pieces:
            return StrategyResult.empty(self.name)

        height_map = HeightMap(self.config.roll_width)
        placements = [
            height_map.place_lowest(piece) for piece in sorted(pieces, key=_by_area)
        ]
        return StrategyResult(
            name=self.name,
            placements=tuple(placements),
            max_length=height_map.max_height,
        )


class ScoredPlacementStrategy:
    """Two-phase placement scored on height plus trapped gap area.

    Large pieces are placed first, then the rest, each phase largest area
    first. Every offset is scored as
    ``new_height + gap_penalty_weight * gap_area`` so placements that trap
    unused material beneath the piece are penalized.
    """

    name = "scored_two_phase"

    def __init__(self, config: PackingConfig) -> None:
        self.config = config

    def pack(self, pieces: Sequence[Piece]) -> StrategyResult:
        if not pieces:
            return StrategyResult.empty(self.name)

        threshold = self.config.large_piece_threshold
        first_phase = [
            p for p in pieces if p.width_total >= threshold or p.length_total >= threshold
        ]
        second_phase = [
            p for p in pieces if p.width_total < threshold and p.length_total < threshold
        ]

        height_map = HeightMap(self.config.roll_width)
        placements: list[PlacedPiece] = []

        for phase in (first_phase, second_phase):
            for piece in sorted(phase, key=_by_area):
                x, y = self._best_position(height_map, piece)
                placements.append(height_map.place(piece, x, y))

        return StrategyResult(
            name=self.name,
            placements=tuple(placements),
            max_length=height_map.max_height,
        )

    def _best_position(self, height_map: HeightMap, piece: Piece) -> tuple[int, int]:
        width = piece.width_total
        weight = self.config.gap_penalty_weight
        best: tuple[float, int, int] | None = None

        for x in height_map.positions(width):
            y = height_map.span_height(x, width)
            score = y + piece.length_total + weight * height_map.gap_area(x, width, y)
            if best is None or score < best[0]:
                best = (score, x, y)

        assert best is not None
        return best[1], best[2]


class SmallPieceGroupingStrategy:
    """Place clusters of near-identical pieces as contiguous rows.

    A cluster is two or more pieces whose width and length both match
    within ``cluster_tolerance``. Long unique pieces go first, then each
    cluster as rows across the roll, then the remaining unique pieces
    with a scan that prefers low, snug positions.
    """

    name = "small_piece_grouping"

    def __init__(self, config: PackingConfig) -> None:
        self.config = config

    def pack(self, pieces: Sequence[Piece]) -> StrategyResult:
        if not pieces:
            return StrategyResult.empty(self.name)

        clusters, unique = self._find_clusters(sorted(pieces, key=_by_area))
        long_threshold = self.config.long_piece_threshold
        long_unique = sorted(
            (p for p in unique if p.length_total > long_threshold), key=_by_length
        )
        short_unique = [p for p in unique if p.length_total <= long_threshold]

        height_map = HeightMap(self.config.roll_width)
        placements: list[PlacedPiece] = []

        for piece in long_unique:
            placements.append(height_map.place_lowest(piece))

        clusters.sort(key=lambda cluster: -sum(p.area for p in cluster))
        for cluster in clusters:
            for row in self._rows(cluster):
                x, y = height_map.find_lowest(sum(p.width_total for p in row))
                for piece in row:
                    placements.append(height_map.place(piece, x, y))
                    x += piece.width_total

        for piece in short_unique:
            x, y = self._snug_position(height_map, piece)
            placements.append(height_map.place(piece, x, y))

        return StrategyResult(
            name=self.name,
            placements=tuple(placements),
            max_length=height_map.max_height,
        )

    def _find_clusters(
        self, pieces: list[Piece]
    ) -> tuple[list[list[Piece]], list[Piece]]:
        tolerance = self.config.cluster_tolerance
        clusters: list[list[Piece]] = []
        unique: list[Piece] = []
        remaining = list(pieces)

        while remaining:
            seed = remaining.pop(0)
            members = [seed]
            leftover: list[Piece] = []
            for piece in remaining:
                if (
                    abs(piece.width_total - seed.width_total) <= tolerance
                    and abs(piece.length_total - seed.length_total) <= tolerance
                ):
                    members.append(piece)
                else:
                    leftover.append(piece)
            remaining = leftover

            if len(members) >= 2:
                clusters.append(members)
            else:
                unique.append(seed)

        return clusters, unique

    def _rows(self, cluster: list[Piece]) -> Iterator[list[Piece]]:
        """Split a cluster into rows no wider than the roll."""
        row: list[Piece] = []
        width = 0
        for piece in cluster:
            if row and width + piece.width_total > self.config.roll_width:
                yield row
                row, width = [], 0
            row.append(piece)
            width += piece.width_total
        if row:
            yield row

    def _snug_position(self, height_map: HeightMap, piece: Piece) -> tuple[int, int]:
        width = piece.width_total
        best: tuple[int, int, int] | None = None  # (y, gap area, x)
        for x in height_map.positions(width):
            y = height_map.span_height(x, width)
            candidate = (y, height_map.gap_area(x, width, y), x)
            if best is None or candidate < best:
                best = candidate
        assert best is not None
        return best[2], best[0]


@dataclass(frozen=True)
class _Gap:
    """Empty rectangle below the current maximum height."""

    x: int
    width: int
    y: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


class GapFillStrategy:
    """Fill enclosed gaps before growing the layout.

    Longest pieces first. Before each placement the column tops are
    rebuilt from every placed rectangle and all gaps of at least
    ``min_gap_size`` on both sides below the current maximum height are
    enumerated; the piece goes into the tightest gap it fits, otherwise
    to the lowest available position.

    Rebuilding the occupancy on every placement is quadratic in the
    number of pieces. That is fine for a house worth of rooms but will
    not scale to large catalogs.
    """

    name = "aggressive_gap_fill"

    def __init__(self, config: PackingConfig) -> None:
        self.config = config

    def pack(self, pieces: Sequence[Piece]) -> StrategyResult:
        if not pieces:
            return StrategyResult.empty(self.name)

        placements: list[PlacedPiece] = []
        for piece in sorted(pieces, key=_by_length_then_width):
            height_map = HeightMap.from_placements(placements, self.config.roll_width)
            gap = self._tightest_gap(piece, self._find_gaps(height_map))
            if gap is not None:
                placed = height_map.place(piece, gap.x, gap.y)
            else:
                placed = height_map.place_lowest(piece)
            placements.append(placed)

        return StrategyResult(
            name=self.name,
            placements=tuple(placements),
            max_length=max(placed.top_edge for placed in placements),
        )

    def _find_gaps(self, height_map: HeightMap) -> list[_Gap]:
        ceiling = height_map.max_height
        heights = height_map.heights
        min_size = self.config.min_gap_size
        gaps: set[_Gap] = set()

        for level in sorted({h for h in heights if h < ceiling}):
            if ceiling - level < min_size:
                continue
            start: int | None = None
            # The trailing ceiling closes a run that reaches the right edge
            for i, height in enumerate([*heights, ceiling]):
                if height <= level:
                    if start is None:
                        start = i
                elif start is not None:
                    if i - start >= min_size:
                        gaps.add(_Gap(x=start, width=i - start, y=level, height=ceiling - level))
                    start = None

        return sorted(gaps, key=lambda g: (g.y, g.x, g.width))

    def _tightest_gap(self, piece: Piece, gaps: list[_Gap]) -> _Gap | None:
        fitting = [
            gap
            for gap in gaps
            if piece.width_total <= gap.width and piece.length_total <= gap.height
        ]
        if not fitting:
            return None
        return min(fitting, key=lambda g: (g.area - piece.area, g.y, g.x))


def default_strategies(config: PackingConfig | None = None) -> list[PackingStrategy]:
    """Build the seven packing heuristics in evaluation order.

    Args:
        config: Packing configuration. Defaults to PackingConfig().

    Returns:
        List of strategies; earlier entries win ties.
    """
    config = config or PackingConfig()
    return [
        ShelfPackingStrategy(
            "shelf_loose",
            config.loose_shelf_tolerance,
            _by_length_then_width,
            config.roll_width,
        ),
        ShelfPackingStrategy(
            "shelf_tight",
            config.tight_shelf_tolerance,
            _by_length,
            config.roll_width,
        ),
        LengthGroupingStrategy(config),
        FirstFitByAreaStrategy(config),
        ScoredPlacementStrategy(config),
        SmallPieceGroupingStrategy(config),
        GapFillStrategy(config),
    ]
