"""
PhotoPin API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           PHOTOPIN API                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Error Handler                                        │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌────────┐ ┌──────┐ ┌───────┐ ┌──────┐ ┌──────┐           │          │
│   │  │ Health │ │ Auth │ │ Users │ │ Maps │ │ Pins │           │          │
│   │  └────────┘ └──────┘ └───────┘ └──────┘ └──────┘           │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────────────────────┐    │          │
│   │  │ Database │ │   Auth   │ │ User / Map / Pin Service │    │          │
│   │  └──────────┘ └──────────┘ └──────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection checked (tables created if configured)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database engine disposed

Usage:
======
    uvicorn photopin.api.main:app --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from photopin.config.settings import settings
from photopin.shared.db import init_db, close_db
from photopin.shared.core.logging import logger
from photopin.shared.schemas.common import ErrorResponse
from photopin.api.middleware import setup_exception_handlers
from photopin.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database on startup and dispose of it on shutdown."""
    logger.info(
        "Starting PhotoPin API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    if settings.is_production and settings.SECRET_KEY == "change-me-in-production":
        logger.warning("SECRET_KEY is the default value, tokens can be forged")

    await init_db()
    logger.info("PhotoPin API started successfully")

    yield

    logger.info("Shutting down PhotoPin API")
    await close_db()
    logger.info("PhotoPin API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds CORS middleware
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Photography spots organized in maps and collections",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
        responses={
            status_code: {"model": ErrorResponse} for status_code in (400, 401, 403, 404, 409, 500)
        },
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)
    register_routes(app)

    return app


# Create the application instance
app = create_application()
