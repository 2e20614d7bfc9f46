"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from photopin.shared.models.enums import Language
from photopin.shared.schemas.common import BaseSchema


class UserRegister(BaseModel):
    """Schema for user registration."""

    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class UserLogin(BaseModel):
    """Schema for user login."""

    email: EmailStr
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    """
    Schema for a partial profile update.

    Only the fields actually sent are forwarded to the service
    (``model_dump(exclude_unset=True)``).
    """

    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    avatar: Optional[str] = None
    language: Optional[Language] = None
    favorite_public_map: Optional[str] = None


class UserResponse(BaseSchema):
    """Public user projection."""

    name: str
    surname: str
    email: str
    avatar: Optional[str] = None
    language: str
    favorite_public_map: Optional[str] = None


class AuthResponse(BaseModel):
    """Schema for authentication response."""

    id: str
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
