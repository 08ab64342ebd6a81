"""API routers for the REST API."""

from carpets.web.routers.carpet import router as carpet_router
from carpets.web.routers.hardwood import router as hardwood_router
from carpets.web.routers.parse import router as parse_router

__all__ = [
    "carpet_router",
    "hardwood_router",
    "parse_router",
]
