"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Usage:
======
    from photopin.shared.schemas.common import BaseSchema, IdResponse, ErrorResponse

    @router.post("", response_model=IdResponse, status_code=201)
    async def create(...):
        return IdResponse(id=new_id)
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class IdResponse(BaseModel):
    """Id of a created resource."""

    id: str


class CountResponse(BaseModel):
    """Number of items after an insert (e.g. collections in a map)."""

    count: int


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "no map with id 7c1e...",
                "details": {"resource": "Map"}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "photopin"
    version: str = "1.0.1"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
