"""
Map Schemas

Request/response models for map and collection endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from photopin.shared.schemas.common import BaseSchema
from photopin.shared.schemas.pin import PinResponse


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class MapCreate(BaseModel):
    """Schema for creating a map."""

    title: str
    description: Optional[str] = None
    cover_image: Optional[str] = None
    is_public: bool = False


class MapUpdate(BaseModel):
    """
    Schema for updating a map.

    Empty strings are accepted but leave the field unchanged.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None
    is_public: Optional[bool] = None


class CollectionCreate(BaseModel):
    """Schema for adding a collection to a map."""

    title: str


class CollectionRename(BaseModel):
    """Schema for renaming a collection."""

    title: str = Field(description="New title")


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class CollectionResponse(BaseModel):
    """Collection with pin ids."""

    title: str
    pins: list[str]


class PopulatedCollectionResponse(BaseModel):
    """Collection with full pins."""

    title: str
    pins: list[PinResponse]


class MapResponse(BaseSchema):
    """Map with its collections holding pin ids."""

    id: str
    title: str
    description: Optional[str] = None
    cover_image: Optional[str] = None
    is_public: bool
    author_id: str
    collections: list[CollectionResponse]


class PopulatedMapResponse(MapResponse):
    """Map with its collections holding full pins."""

    collections: list[PopulatedCollectionResponse]
