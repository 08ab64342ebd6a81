"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from carpets.application.config import ConfigError
from carpets.application.dtos import CarpetInputError


class PieceNotFoundError(Exception):
    """Raised when a move targets a needs piece that is not in the layout."""

    def __init__(self, piece_id: int) -> None:
        self.piece_id = piece_id
        super().__init__(f"Needs piece not found: {piece_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(CarpetInputError)
    async def input_error_handler(
        request: Request, exc: CarpetInputError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid carpet input",
                "error_type": "input",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(PieceNotFoundError)
    async def piece_not_found_handler(
        request: Request, exc: PieceNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"piece_id": exc.piece_id},
            },
        )
