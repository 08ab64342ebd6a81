"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from carpets.web.schemas.common import PieceSchema, PlacedPieceSchema


class CarpetResultSchema(BaseModel):
    """Response for carpet calculations and edits."""

    standard: list[PieceSchema] = Field(default_factory=list, description="Full-width pieces")
    needs: list[PlacedPieceSchema] = Field(default_factory=list, description="Packed pieces")
    standard_length: int = Field(..., description="Length of standard pieces in inches")
    needs_length: int = Field(..., description="Length of the needs layout in inches")
    total_length: int = Field(..., description="Total roll length in inches")
    total_sq_ft: float = Field(..., description="Roll area consumed")
    total_sq_yd: float = Field(..., description="Roll area consumed in square yards")
    used_sq_ft: float = Field(..., description="Area of the requested pieces")
    waste_sq_ft: float = Field(..., description="Roll area not used by pieces")
    waste_percent: float = Field(..., description="Waste as a percentage of the roll area")
    is_flipped: bool = Field(..., description="Whether the job is rotated 90 degrees")
    strategy: str = Field(default="", description="Packing candidate that placed the needs")
    roll_width: int = Field(..., description="Roll width in inches")
    warnings: list[str] = Field(default_factory=list, description="Layout problems")


class ParseEntrySchema(BaseModel):
    """One entry of a bulk parse."""

    raw: str
    piece: PieceSchema | None = None
    error: str | None = None
    warning: str | None = None


class ParseResultSchema(BaseModel):
    """Response for a bulk parse preview."""

    entries: list[ParseEntrySchema] = Field(default_factory=list)
    valid: list[PieceSchema] = Field(default_factory=list)
    valid_count: int = 0
    error_count: int = 0
    warning_count: int = 0


class HardwoodResultSchema(BaseModel):
    """Response for a hardwood estimate."""

    total_sq_ft: float = Field(..., description="Room area")
    waste_sq_ft: float = Field(..., description="Waste allowance area")
    total_needed: float = Field(..., description="Area to buy")
    boxes_needed: int = Field(..., description="Boxes to buy")
    waste_percent: float
    box_sq_ft: float


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
