"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from carpets.web.schemas.common import (
    OptionsSchema,
    PieceSchema,
    PlacedPieceSchema,
    RoomSchema,
)


class CalculateRequest(BaseModel):
    """Request for a carpet roll calculation."""

    rooms: list[RoomSchema] = Field(default_factory=list, description="Room measurements")
    bulk: str | None = Field(
        default=None, description="Free-text measurements, e.g. 'LR 11.6x13.6'"
    )
    options: OptionsSchema = Field(default_factory=OptionsSchema)
    packing: dict[str, Any] | None = Field(
        default=None, description="Packing tunables (same shape as the job file)"
    )
    seed: int | None = Field(default=None, description="Seed for reproducible annealing")


class LayoutSchema(BaseModel):
    """A calculated layout sent back for editing."""

    standard: list[PieceSchema] = Field(default_factory=list)
    needs: list[PlacedPieceSchema] = Field(default_factory=list)
    standard_length: int = Field(default=0, ge=0)
    used_sq_ft: float = Field(default=0.0, ge=0)
    is_flipped: bool = False
    strategy: str = ""
    roll_width: int = Field(default=144, gt=0)


class RecalculateRequest(LayoutSchema):
    """Request to recompute totals after needs pieces were moved by hand."""


class MoveRequest(LayoutSchema):
    """Request to move one needs piece, snapping to nearby edges."""

    piece_id: int = Field(..., description="Id of the needs piece to move")
    x: int = Field(..., description="Requested x in inches")
    y: int = Field(..., description="Requested y in inches")
    snap: bool = Field(default=True, description="Snap to edges within 5in")


class ParseRequest(BaseModel):
    """Request to preview free-text measurements."""

    text: str = Field(..., description="Measurements to parse")
    next_id: int = Field(default=1, ge=1, description="Id for the first valid piece")


class HardwoodRequest(BaseModel):
    """Request for a hardwood box estimate."""

    rooms: list[RoomSchema] = Field(default_factory=list, description="Room measurements")
    bulk: str | None = Field(default=None, description="Free-text measurements")
    waste_percent: float = Field(default=7.0, ge=0, le=100)
    box_sq_ft: float = Field(default=25.0, gt=0)
