"""
Pin Schemas

Request/response models for pin endpoints.
"""

from typing import Optional

from pydantic import BaseModel

from photopin.shared.schemas.common import BaseSchema


class Coordinates(BaseModel):
    """Decimal-degree coordinates; ranges are checked by the service."""

    latitude: float
    longitude: float


class PinFields(BaseModel):
    """Text fields shared by pin create and update payloads."""

    description: Optional[str] = None
    url_image: Optional[str] = None
    best_time_of_year: Optional[str] = None
    best_time_of_day: Optional[str] = None
    photography_tips: Optional[str] = None
    travel_information: Optional[str] = None


class PinCreate(PinFields):
    """Schema for creating a pin inside a collection."""

    title: str
    coordinates: Coordinates


class PinUpdate(PinFields):
    """
    Schema for updating a pin.

    Whether unsent fields are cleared or kept is decided by the service
    policy; the handler forwards only the fields that were sent.
    """

    title: Optional[str] = None
    coordinates: Optional[Coordinates] = None


class PinResponse(BaseSchema):
    """Serialized pin."""

    id: str
    title: str
    description: Optional[str] = None
    url_image: Optional[str] = None
    best_time_of_year: Optional[str] = None
    best_time_of_day: Optional[str] = None
    photography_tips: Optional[str] = None
    travel_information: Optional[str] = None
    coordinates: Coordinates
    author_id: str
    map_id: str
