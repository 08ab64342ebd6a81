"""FastAPI REST API for carpet roll planning.

This module provides a REST API for calculating roll plans, editing
needs layouts by hand, previewing bulk measurements and estimating
hardwood.

Usage:
    uvicorn carpets.web:app --reload
"""

from carpets.web.app import app, create_app

__all__ = ["app", "create_app"]
