"""Pydantic schemas for the REST API."""

from carpets.web.schemas.common import (
    OptionsSchema,
    PieceSchema,
    PlacedPieceSchema,
    RoomSchema,
)
from carpets.web.schemas.requests import (
    CalculateRequest,
    HardwoodRequest,
    LayoutSchema,
    MoveRequest,
    ParseRequest,
    RecalculateRequest,
)
from carpets.web.schemas.responses import (
    CarpetResultSchema,
    ErrorResponseSchema,
    HardwoodResultSchema,
    ParseEntrySchema,
    ParseResultSchema,
)

__all__ = [
    # Common
    "OptionsSchema",
    "PieceSchema",
    "PlacedPieceSchema",
    "RoomSchema",
    # Requests
    "CalculateRequest",
    "HardwoodRequest",
    "LayoutSchema",
    "MoveRequest",
    "ParseRequest",
    "RecalculateRequest",
    # Responses
    "CarpetResultSchema",
    "ErrorResponseSchema",
    "HardwoodResultSchema",
    "ParseEntrySchema",
    "ParseResultSchema",
]
