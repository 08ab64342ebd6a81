"""Carpet calculation and layout editing endpoints."""

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from carpets.application.config import (
    config_to_options,
    config_to_packing,
    config_to_pieces,
    load_config_from_dict,
)
from carpets.domain import (
    CarpetResult,
    Piece,
    PlacedPiece,
    find_layout_errors,
    move_needs_piece,
    recalculate,
)
from carpets.web.dependencies import CalculatorFactoryDep
from carpets.web.exceptions import PieceNotFoundError
from carpets.web.schemas.common import PieceSchema, PlacedPieceSchema
from carpets.web.schemas.requests import (
    CalculateRequest,
    LayoutSchema,
    MoveRequest,
    RecalculateRequest,
)
from carpets.web.schemas.responses import CarpetResultSchema, ErrorResponseSchema

router = APIRouter(prefix="/carpet", tags=["carpet"])


def piece_to_schema(piece: Piece) -> PieceSchema:
    return PieceSchema(
        id=piece.id, label=piece.label, width=piece.width_total, length=piece.length_total
    )


def _result_to_schema(result: CarpetResult) -> CarpetResultSchema:
    """Convert a CarpetResult to the response schema, with layout warnings."""
    return CarpetResultSchema(
        standard=[piece_to_schema(piece) for piece in result.standard],
        needs=[
            PlacedPieceSchema(
                id=placed.id,
                label=placed.piece.label,
                width=placed.width,
                length=placed.length,
                x=placed.x,
                y=placed.y,
            )
            for placed in result.needs
        ],
        standard_length=result.standard_length,
        needs_length=result.needs_length,
        total_length=result.total_length,
        total_sq_ft=result.total_sq_ft,
        total_sq_yd=result.total_sq_yd,
        used_sq_ft=result.used_sq_ft,
        waste_sq_ft=result.waste_sq_ft,
        waste_percent=result.waste_percent,
        is_flipped=result.is_flipped,
        strategy=result.strategy,
        roll_width=result.roll_width,
        warnings=find_layout_errors(result.needs, result.roll_width),
    )


def _layout_to_result(layout: LayoutSchema) -> CarpetResult:
    """Rebuild a CarpetResult from a layout sent back by the client.

    Only the inputs of the synthesis are taken from the client; every
    derived total is recomputed.
    """
    standard = tuple(
        Piece.from_inches(p.id, p.width, p.length, label=p.label) for p in layout.standard
    )
    needs = tuple(
        PlacedPiece(
            piece=Piece.from_inches(p.id, p.width, p.length, label=p.label), x=p.x, y=p.y
        )
        for p in layout.needs
    )
    return recalculate(
        CarpetResult(
            standard=standard,
            needs=needs,
            standard_length=layout.standard_length,
            used_sq_ft=layout.used_sq_ft,
            is_flipped=layout.is_flipped,
            strategy=layout.strategy,
            roll_width=layout.roll_width,
        )
    )


@router.post(
    "/calculate",
    response_model=CarpetResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate_carpet(
    request: CalculateRequest,
    calculator_factory: CalculatorFactoryDep,
) -> CarpetResultSchema:
    """Calculate the roll plan for a set of rooms.

    The search can take a few seconds, so it runs in the thread pool
    instead of on the event loop.

    Raises:
        ConfigError: If the rooms, bulk text or tunables are invalid
            (mapped to 422).
    """
    data = {
        "schema_version": "1.0",
        "rooms": [room.model_dump() for room in request.rooms],
        "bulk": request.bulk,
        "options": request.options.model_dump(),
    }
    if request.packing is not None:
        data["packing"] = request.packing

    config = load_config_from_dict(data)
    pieces = config_to_pieces(config)
    calculator = calculator_factory(config_to_packing(config, seed=request.seed))

    result = await run_in_threadpool(calculator.calculate, pieces, config_to_options(config))
    return _result_to_schema(result)


@router.post("/recalculate", response_model=CarpetResultSchema)
async def recalculate_layout(request: RecalculateRequest) -> CarpetResultSchema:
    """Recompute totals after needs pieces were repositioned by hand."""
    return _result_to_schema(_layout_to_result(request))


@router.post(
    "/move",
    response_model=CarpetResultSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def move_piece(request: MoveRequest) -> CarpetResultSchema:
    """Move one needs piece, clamping and snapping it, and recompute totals.

    Raises:
        PieceNotFoundError: If ``piece_id`` is not a needs piece (mapped to 404).
    """
    result = _layout_to_result(request)
    try:
        moved = move_needs_piece(result, request.piece_id, request.x, request.y, snap=request.snap)
    except KeyError as e:
        raise PieceNotFoundError(request.piece_id) from e
    return _result_to_schema(moved)
