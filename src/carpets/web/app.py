"""FastAPI application for the carpet roll planner."""

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carpets.web.exceptions import register_exception_handlers
from carpets.web.routers import carpet_router, hardwood_router, parse_router

API_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "carpet",
        "description": "Plan a roll for a set of rooms, then adjust the needs layout by hand.",
    },
    {
        "name": "parse",
        "description": "Preview quick-entry measurements such as `LR 11.6x13.6`.",
    },
    {
        "name": "hardwood",
        "description": "Estimate boxes of hardwood for the same rooms.",
    },
]


def create_app(cors_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Build the API.

    The layout editor runs in the browser, so CORS is open by default.

    Args:
        cors_origins: Origins allowed to call the API.

    Returns:
        FastAPI application with the carpet, parse and hardwood routes
        under ``/api/v1`` and a ``/health`` probe.
    """
    app = FastAPI(
        title="Carpet Roll Planner API",
        description="Plan carpet cuts from a 12ft roll and estimate hardwood boxes",
        version="1.0.0",
        openapi_tags=OPENAPI_TAGS,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (carpet_router, parse_router, hardwood_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


# Served by `uvicorn carpets.web:app`
app = create_app()
