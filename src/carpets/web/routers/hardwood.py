"""Hardwood estimate endpoint."""

from fastapi import APIRouter

from carpets.application.dtos import CarpetInput, CarpetInputError, RoomInput
from carpets.domain import calculate_hardwood
from carpets.infrastructure.measurement_parser import parse_bulk_measurements
from carpets.web.schemas.requests import HardwoodRequest
from carpets.web.schemas.responses import ErrorResponseSchema, HardwoodResultSchema

router = APIRouter(prefix="/hardwood", tags=["hardwood"])


@router.post(
    "",
    response_model=HardwoodResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def estimate_hardwood(request: HardwoodRequest) -> HardwoodResultSchema:
    """Estimate hardwood area and boxes for a set of rooms.

    Raises:
        CarpetInputError: If no usable room is given or an entry is
            invalid (mapped to 422).
    """
    data = CarpetInput(
        rooms=[
            RoomInput(
                width_feet=room.width_feet,
                width_inches=room.width_inches,
                length_feet=room.length_feet,
                length_inches=room.length_inches,
                label=room.label,
            )
            for room in request.rooms
        ]
    )
    errors = data.validate()
    pieces = data.to_pieces()

    if request.bulk:
        parsed = parse_bulk_measurements(request.bulk, next_id=len(pieces) + 1)
        errors.extend(f"{e.raw!r}: {e.error}" for e in parsed.entries if e.error)
        pieces.extend(parsed.valid)

    if not errors and not pieces:
        errors.append("At least one room is required")
    if errors:
        raise CarpetInputError(errors)

    result = calculate_hardwood(
        pieces, waste_percent=request.waste_percent, box_sq_ft=request.box_sq_ft
    )
    return HardwoodResultSchema(
        total_sq_ft=result.total_sq_ft,
        waste_sq_ft=result.waste_sq_ft,
        total_needed=result.total_needed,
        boxes_needed=result.boxes_needed,
        waste_percent=result.waste_percent,
        box_sq_ft=result.box_sq_ft,
    )
