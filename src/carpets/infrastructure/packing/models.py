"""Packing configuration and working structures.

This module provides the tunable configuration for the packing search,
the result type shared by all strategies, and the two working structures
the strategies build on: shelves and the per-column height map.

The numeric defaults were chosen empirically; they are tunable, not
provably optimal.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from carpets.domain.value_objects import ROLL_WIDTH_INCHES, Piece, PlacedPiece


@dataclass(frozen=True)
class AnnealingConfig:
    """Configuration for the simulated-annealing refiner.

    Attributes:
        enabled: Whether refinement runs at all.
        min_pieces: Smallest needs list worth refining.
        max_iterations: Upper bound on swap iterations.
        time_limit_ms: Wall-clock budget in milliseconds.
        check_interval: Iterations between wall-clock checks.
        initial_temperature: Starting temperature.
        cooling_rate: Multiplier applied to the temperature per iteration.
        min_temperature: Temperature floor.
        seed: Optional seed for reproducible runs.
    """

    enabled: bool = True
    min_pieces: int = 3
    max_iterations: int = 3000
    time_limit_ms: float = 3000.0
    check_interval: int = 100
    initial_temperature: float = 30.0
    cooling_rate: float = 0.99
    min_temperature: float = 0.1
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.min_pieces < 2:
            raise ValueError("Annealing needs at least 2 pieces to swap")
        if self.max_iterations < 0:
            raise ValueError("Maximum iterations must be non-negative")
        if self.time_limit_ms <= 0:
            raise ValueError("Time limit must be positive")
        if self.check_interval < 1:
            raise ValueError("Check interval must be at least 1")
        if self.initial_temperature <= 0 or self.min_temperature <= 0:
            raise ValueError("Temperatures must be positive")
        if not 0 < self.cooling_rate <= 1:
            raise ValueError("Cooling rate must be in (0, 1]")


@dataclass(frozen=True)
class PackingConfig:
    """Configuration for the needs packing strategies.

    Attributes:
        roll_width: Roll width in inches.
        loose_shelf_tolerance: Max shelf height surplus for loose shelf packing.
        tight_shelf_tolerance: Max shelf height surplus for tight shelf packing.
        length_group_tolerance: Max length difference within a length group.
        large_piece_threshold: Width or length at which a piece counts as large.
        gap_penalty_weight: Weight of the gap area in scored placement.
        cluster_tolerance: Max dimension difference for similar-piece clusters.
        long_piece_threshold: Length above which unique pieces are placed first.
        min_gap_size: Smallest gap side considered by aggressive gap filling.
        annealing: Simulated-annealing refiner configuration.
    """

    roll_width: int = ROLL_WIDTH_INCHES
    loose_shelf_tolerance: int = 6
    tight_shelf_tolerance: int = 4
    length_group_tolerance: int = 6
    large_piece_threshold: int = 48
    gap_penalty_weight: float = 0.5
    cluster_tolerance: int = 2
    long_piece_threshold: int = 100
    min_gap_size: int = 12
    annealing: AnnealingConfig = field(default_factory=AnnealingConfig)

    def __post_init__(self) -> None:
        if self.roll_width <= 0:
            raise ValueError("Roll width must be positive")
        tolerances = (
            self.loose_shelf_tolerance,
            self.tight_shelf_tolerance,
            self.length_group_tolerance,
            self.cluster_tolerance,
        )
        if min(tolerances) < 0:
            raise ValueError("Tolerances must be non-negative")
        if self.gap_penalty_weight < 0:
            raise ValueError("Gap penalty weight must be non-negative")
        if min(
            self.large_piece_threshold, self.long_piece_threshold, self.min_gap_size
        ) <= 0:
            raise ValueError("Size thresholds must be positive")


@dataclass(frozen=True)
class StrategyResult:
    """Placement produced by one packing candidate.

    Attributes:
        name: Name of the strategy (or refiner) that produced it.
        placements: Placed pieces in the order they were processed.
        max_length: Furthest roll length reached by any piece.
    """

    name: str
    placements: tuple[PlacedPiece, ...]
    max_length: int

    @property
    def order(self) -> tuple[Piece, ...]:
        """Pieces in processing order."""
        return tuple(placed.piece for placed in self.placements)

    @classmethod
    def empty(cls, name: str) -> "StrategyResult":
        return cls(name=name, placements=(), max_length=0)


@dataclass
class _Shelf:
    """Internal shelf representation for shelf packing.

    A horizontal band across the roll; pieces are placed left to right.

    Attributes:
        y: Start of the shelf along the roll.
        height: Shelf height (length of its tallest member).
        used_width: Width consumed by pieces on the shelf.
        pieces: Pieces placed on this shelf.
    """

    y: int
    height: int
    used_width: int = 0
    pieces: list[PlacedPiece] = field(default_factory=list)

    @property
    def top(self) -> int:
        return self.y + self.height

    def place(self, piece: Piece) -> PlacedPiece:
        placed = PlacedPiece(piece=piece, x=self.used_width, y=self.y)
        self.pieces.append(placed)
        self.used_width += piece.width_total
        return placed


class HeightMap:
    """Per-inch-column record of the furthest length consumed.

    One entry per inch across the roll. Values only ever grow, so a piece
    placed at the maximum height of its span can never overlap an earlier
    piece.
    """

    def __init__(self, width: int = ROLL_WIDTH_INCHES) -> None:
        self.width = width
        self.heights = [0] * width

    @classmethod
    def from_placements(
        cls, placements: list[PlacedPiece], width: int = ROLL_WIDTH_INCHES
    ) -> "HeightMap":
        """Rebuild the column tops from a set of placed rectangles."""
        height_map = cls(width)
        for placed in placements:
            height_map.raise_span(placed.x, placed.width, placed.top_edge)
        return height_map

    @property
    def max_height(self) -> int:
        return max(self.heights, default=0)

    def span_height(self, x: int, width: int) -> int:
        """Highest column within ``[x, x + width)``."""
        return max(self.heights[x : x + width], default=0)

    def gap_area(self, x: int, width: int, y: int) -> int:
        """Unused area left beneath a piece resting at ``y`` over the span."""
        return sum(y - h for h in self.heights[x : x + width])

    def positions(self, width: int) -> range:
        """Every valid x offset for a piece of the given width."""
        if width > self.width:
            raise ValueError(
                f"Piece width {width} exceeds roll width {self.width}"
            )
        return range(self.width - width + 1)

    def find_lowest(self, width: int) -> tuple[int, int]:
        """Find the leftmost position with the lowest resting height.

        Args:
            width: Width of the piece to place.

        Returns:
            Tuple of (x, y).
        """
        best_x = 0
        best_y: int | None = None
        for x in self.positions(width):
            y = self.span_height(x, width)
            if best_y is None or y < best_y:
                best_x, best_y = x, y
                if y == 0:
                    break
        return best_x, best_y or 0

    def raise_span(self, x: int, width: int, top: int) -> None:
        """Raise the columns under ``[x, x + width)`` to at least ``top``."""
        for i in range(x, x + width):
            if self.heights[i] < top:
                self.heights[i] = top

    def place(self, piece: Piece, x: int, y: int) -> PlacedPiece:
        """Record a piece at ``(x, y)`` and return its placement."""
        self.raise_span(x, piece.width_total, y + piece.length_total)
        return PlacedPiece(piece=piece, x=x, y=y)

    def place_lowest(self, piece: Piece) -> PlacedPiece:
        """Place a piece at the lowest available position."""
        x, y = self.find_lowest(piece.width_total)
        return self.place(piece, x, y)
