"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from carpets.domain import CarpetOptions, Piece


class CarpetInputError(ValueError):
    """Raised when a CarpetInput fails validation.

    Attributes:
        errors: Individual validation messages.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


@dataclass
class RoomInput:
    """Input DTO for one room measurement."""

    width_feet: int
    width_inches: int = 0
    length_feet: int = 0
    length_inches: int = 0
    label: str = ""

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        name = self.label or "Room"
        errors: list[str] = []
        if min(self.width_feet, self.width_inches, self.length_feet, self.length_inches) < 0:
            errors.append(f"{name}: dimensions cannot be negative")
            return errors
        if self.width_feet * 12 + self.width_inches == 0:
            errors.append(f"{name}: width must be greater than zero")
        if self.length_feet * 12 + self.length_inches == 0:
            errors.append(f"{name}: length must be greater than zero")
        return errors

    def to_piece(self, id: int) -> Piece:
        """Convert to a Piece value object."""
        return Piece(
            id=id,
            width_feet=self.width_feet,
            width_inches=self.width_inches,
            length_feet=self.length_feet,
            length_inches=self.length_inches,
            label=self.label,
        )


@dataclass
class CarpetInput:
    """Input DTO for a carpet calculation."""

    rooms: list[RoomInput] = field(default_factory=list)
    add_slippage: bool = False
    steps: int = 0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        for room in self.rooms:
            errors.extend(room.validate())
        if self.steps < 0:
            errors.append("Steps cannot be negative")
        if self.steps > 100:
            errors.append("Maximum 100 steps supported")
        return errors

    def to_pieces(self) -> list[Piece]:
        """Convert rooms to pieces numbered from 1."""
        return [room.to_piece(i) for i, room in enumerate(self.rooms, start=1)]

    def to_options(self) -> CarpetOptions:
        return CarpetOptions(add_slippage=self.add_slippage, steps=self.steps)
