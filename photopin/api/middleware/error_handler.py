"""
Error Handler Middleware

Global exception handling for the API.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "no map with id 7c1e...",
            "details": {"resource": "Map", "id": "7c1e..."}
        }
    }

Exception Handling:
===================
1. PhotopinException subclasses → their status_code and to_dict()
   (ValidationError 400, CredentialsError/AuthenticationError 401,
   OwnershipError 403, NotFoundError 404, other LogicError 409,
   StorageError 500)
2. Request body/params that do not match the schema → 400
3. Other exceptions → 500 with generic message (details hidden)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError

from photopin.shared.core.exceptions import PhotopinException
from photopin.shared.core.logging import logger


def _validation_response(errors: list) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": jsonable_encoder(errors)},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(PhotopinException)
    async def photopin_exception_handler(
        request: Request,
        exc: PhotopinException,
    ) -> JSONResponse:
        """Map a domain error to its own status code and payload."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.warning(
            "Request validation error",
            errors=jsonable_encoder(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(SchemaValidationError)
    async def schema_validation_handler(
        request: Request,
        exc: SchemaValidationError,
    ) -> JSONResponse:
        logger.warning(
            "Validation error",
            errors=jsonable_encoder(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
