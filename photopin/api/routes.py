"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live   → Health check endpoints
    /auth                    → Credentials to bearer token
    /users                   → Registration and own profile (/users/me)
    /maps                    → Maps and their collections
    /maps/.../pins, /pins    → Pins

Usage:
======
    from photopin.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from photopin.api.handlers import (
    auth_handler,
    health_handler,
    map_handler,
    pin_handler,
    user_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )

    app.include_router(
        map_handler.router,
        prefix="/maps",
        tags=["Maps"],
    )

    # Pin routes span /maps/{id}/collections/{title}/pins and /pins
    app.include_router(
        pin_handler.router,
        tags=["Pins"],
    )
