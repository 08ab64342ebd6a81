"""Core value objects for carpet roll planning.

All measurements are whole inches. Pieces carry both a feet/inches
breakdown (as entered by the installer) and derived total-inch values
used by the packing algorithms.

All dataclasses are frozen (immutable); every pipeline stage produces
new objects instead of mutating its input.
"""

from __future__ import annotations

from dataclasses import dataclass

# Standard broadloom roll: 12 feet wide
ROLL_WIDTH_INCHES = 144

INCHES_PER_FOOT = 12
SQ_INCHES_PER_SQ_FOOT = 144
SQ_FEET_PER_SQ_YARD = 9

# Synthetic stair piece: 4' wide x 2' long
STEP_WIDTH_INCHES = 48
STEP_LENGTH_INCHES = 24

DEFAULT_SLIPPAGE_INCHES = 4


def to_total_inches(feet: int, inches: int) -> int:
    """Convert a feet/inches pair to total inches."""
    return feet * INCHES_PER_FOOT + inches


def format_feet_inches(total_inches: float) -> str:
    """Format a length in inches as feet and inches, e.g. ``11'6"``."""
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = round(total_inches % INCHES_PER_FOOT)
    if inches == INCHES_PER_FOOT:
        feet += 1
        inches = 0
    return f"{feet}'{inches}\""


def format_dimensions(piece: Piece) -> str:
    """Format a piece as ``W x L`` in feet and inches."""
    return (
        f"{format_feet_inches(piece.width_total)} x "
        f"{format_feet_inches(piece.length_total)}"
    )


@dataclass(frozen=True)
class Piece:
    """A rectangular cut required from the roll.

    Width runs across the roll, length runs along it. The inches
    components are normalized to ``[0, 12)`` with overflow carried into
    feet, so ``Piece(1, 10, 15, 8, 0)`` is stored as 11'3" x 8'0".

    Attributes:
        id: Identifier, unique within a single calculation.
        width_feet: Whole feet of width.
        width_inches: Remaining inches of width.
        length_feet: Whole feet of length.
        length_inches: Remaining inches of length.
        label: Optional room label (e.g. "LR").
    """

    id: int
    width_feet: int
    width_inches: int
    length_feet: int
    length_inches: int
    label: str = ""

    def __post_init__(self) -> None:
        if min(
            self.width_feet, self.width_inches, self.length_feet, self.length_inches
        ) < 0:
            raise ValueError("Piece dimensions must be non-negative")

        width_total = to_total_inches(self.width_feet, self.width_inches)
        length_total = to_total_inches(self.length_feet, self.length_inches)
        object.__setattr__(self, "width_feet", width_total // INCHES_PER_FOOT)
        object.__setattr__(self, "width_inches", width_total % INCHES_PER_FOOT)
        object.__setattr__(self, "length_feet", length_total // INCHES_PER_FOOT)
        object.__setattr__(self, "length_inches", length_total % INCHES_PER_FOOT)

    @classmethod
    def from_inches(
        cls, id: int, width: int, length: int, label: str = ""
    ) -> "Piece":
        """Create a piece from total-inch dimensions."""
        if width < 0 or length < 0:
            raise ValueError("Piece dimensions must be non-negative")
        return cls(
            id=id,
            width_feet=width // INCHES_PER_FOOT,
            width_inches=width % INCHES_PER_FOOT,
            length_feet=length // INCHES_PER_FOOT,
            length_inches=length % INCHES_PER_FOOT,
            label=label,
        )

    @property
    def width_total(self) -> int:
        """Width in inches."""
        return to_total_inches(self.width_feet, self.width_inches)

    @property
    def length_total(self) -> int:
        """Length in inches."""
        return to_total_inches(self.length_feet, self.length_inches)

    @property
    def area(self) -> int:
        """Area in square inches."""
        return self.width_total * self.length_total

    def transposed(self) -> "Piece":
        """Return this piece with width and length swapped."""
        return Piece.from_inches(
            self.id, self.length_total, self.width_total, self.label
        )

    def with_width(self, width: int) -> "Piece":
        """Return a copy with a different total width, same length."""
        return Piece.from_inches(self.id, width, self.length_total, self.label)

    def expanded(self, by: int) -> "Piece":
        """Return a copy grown by ``by`` inches on both dimensions."""
        return Piece.from_inches(
            self.id, self.width_total + by, self.length_total + by, self.label
        )


@dataclass(frozen=True)
class PlacedPiece:
    """A piece positioned on the roll.

    ``x`` is measured across the roll from its left edge, ``y`` along the
    roll from where cutting starts.

    Attributes:
        piece: The placed piece.
        x: Offset across the roll in inches.
        y: Offset along the roll in inches.
    """

    piece: Piece
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def id(self) -> int:
        return self.piece.id

    @property
    def width(self) -> int:
        return self.piece.width_total

    @property
    def length(self) -> int:
        return self.piece.length_total

    @property
    def right_edge(self) -> int:
        """X coordinate of the piece's right edge."""
        return self.x + self.width

    @property
    def top_edge(self) -> int:
        """Y coordinate where the piece ends along the roll."""
        return self.y + self.length

    def overlaps(self, other: PlacedPiece) -> bool:
        """Check whether two placed rectangles share any area."""
        return (
            self.x < other.right_edge
            and other.x < self.right_edge
            and self.y < other.top_edge
            and other.y < self.top_edge
        )

    def moved_to(self, x: int, y: int) -> "PlacedPiece":
        """Return the same piece at a new position."""
        return PlacedPiece(piece=self.piece, x=x, y=y)


@dataclass(frozen=True)
class CarpetOptions:
    """Input augmentation options for a carpet calculation.

    Attributes:
        add_slippage: Grow every piece by ``slippage_inches`` in width and length.
        steps: Number of synthetic 4'x2' stair pieces to add.
        slippage_inches: Cutting buffer added when slippage is on.
    """

    add_slippage: bool = False
    steps: int = 0
    slippage_inches: int = DEFAULT_SLIPPAGE_INCHES

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValueError("Step count must be non-negative")
        if self.slippage_inches < 0:
            raise ValueError("Slippage must be non-negative")


@dataclass(frozen=True)
class CarpetResult:
    """Outcome of a carpet roll calculation.

    Lengths are in inches; areas in square feet (``total_sq_yd`` in
    square yards).

    Attributes:
        standard: Full-roll-width pieces, cut end to end.
        needs: Narrower pieces with their positions on the roll.
        standard_length: Roll length consumed by standard pieces.
        needs_length: Roll length consumed by the packed needs pieces.
        total_length: ``standard_length + needs_length``.
        total_sq_ft: Roll area consumed.
        total_sq_yd: Roll area consumed in square yards.
        used_sq_ft: Area of the requested pieces (before slippage).
        waste_sq_ft: ``total_sq_ft - used_sq_ft``.
        waste_percent: Waste as a percentage of ``total_sq_ft``.
        is_flipped: True if every piece was rotated 90 degrees.
        strategy: Name of the packing candidate that produced ``needs``.
        roll_width: Roll width used for the calculation.
    """

    standard: tuple[Piece, ...] = ()
    needs: tuple[PlacedPiece, ...] = ()
    standard_length: int = 0
    needs_length: int = 0
    total_length: int = 0
    total_sq_ft: float = 0.0
    total_sq_yd: float = 0.0
    used_sq_ft: float = 0.0
    waste_sq_ft: float = 0.0
    waste_percent: float = 0.0
    is_flipped: bool = False
    strategy: str = ""
    roll_width: int = ROLL_WIDTH_INCHES

    @property
    def waste_sq_yd(self) -> float:
        """Waste in square yards."""
        return self.waste_sq_ft / SQ_FEET_PER_SQ_YARD

    @property
    def piece_count(self) -> int:
        """Number of cut pieces (standard plus needs)."""
        return len(self.standard) + len(self.needs)


@dataclass(frozen=True)
class HardwoodResult:
    """Outcome of a hardwood flooring estimate.

    Attributes:
        total_sq_ft: Area of all rooms.
        waste_sq_ft: Waste allowance.
        total_needed: Area to purchase.
        boxes_needed: Whole boxes to purchase.
        waste_percent: Waste allowance percentage used.
        box_sq_ft: Coverage of one box.
    """

    total_sq_ft: float
    waste_sq_ft: float
    total_needed: float
    boxes_needed: int
    waste_percent: float = 7.0
    box_sq_ft: float = 25.0
