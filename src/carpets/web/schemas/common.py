"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class RoomSchema(BaseModel):
    """Room measurement in feet and inches."""

    label: str = Field(default="", max_length=40, description="Room name")
    width_feet: int = Field(..., ge=0, description="Width, whole feet")
    width_inches: int = Field(default=0, ge=0, description="Width, extra inches")
    length_feet: int = Field(..., ge=0, description="Length, whole feet")
    length_inches: int = Field(default=0, ge=0, description="Length, extra inches")


class OptionsSchema(BaseModel):
    """Input augmentation options."""

    add_slippage: bool = Field(default=False, description="Add a cutting buffer")
    steps: int = Field(default=0, ge=0, le=100, description="Stair pieces to add")
    slippage_inches: int = Field(default=4, ge=0, le=24, description="Buffer in inches")


class PieceSchema(BaseModel):
    """A piece with totals in inches."""

    id: int = Field(..., description="Piece id")
    label: str = Field(default="", description="Room name")
    width: int = Field(..., ge=0, description="Width in inches")
    length: int = Field(..., ge=0, description="Length in inches")


class PlacedPieceSchema(PieceSchema):
    """A needs piece positioned on the roll."""

    x: int = Field(..., ge=0, description="Offset across the roll in inches")
    y: int = Field(..., ge=0, description="Offset along the roll in inches")
