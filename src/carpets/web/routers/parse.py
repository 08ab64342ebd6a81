"""Bulk measurement parsing endpoint."""

from fastapi import APIRouter

from carpets.infrastructure.measurement_parser import parse_bulk_measurements
from carpets.web.routers.carpet import piece_to_schema
from carpets.web.schemas.requests import ParseRequest
from carpets.web.schemas.responses import ParseEntrySchema, ParseResultSchema

router = APIRouter(prefix="/parse", tags=["parse"])


@router.post("", response_model=ParseResultSchema)
async def parse_measurements(request: ParseRequest) -> ParseResultSchema:
    """Preview free-text measurements.

    Malformed entries are reported per entry; the request itself never
    fails because of them.
    """
    result = parse_bulk_measurements(request.text, next_id=request.next_id)
    return ParseResultSchema(
        entries=[
            ParseEntrySchema(
                raw=entry.raw,
                piece=piece_to_schema(entry.piece) if entry.piece else None,
                error=entry.error,
                warning=entry.warning,
            )
            for entry in result.entries
        ],
        valid=[piece_to_schema(piece) for piece in result.valid],
        valid_count=result.valid_count,
        error_count=result.error_count,
        warning_count=result.warning_count,
    )
