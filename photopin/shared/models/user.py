"""
User Entity Model

Represents a registered PhotoPin user.

A user exclusively owns the maps and pins it authored. Removing a user removes
them too (done explicitly by UserService.remove_user, pins first, then maps).

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                  │ 550e8400-e29b-41d4-a716-446655440000                   │
│ name                │ "Alicia"                                               │
│ surname             │ "Alcaide"                                              │
│ email               │ "alicia@example.com"                                   │
│ password_hash       │ "$2b$10$..."                                           │
│ avatar              │ "https://cdn.example.com/avatars/alicia.png"           │
│ language            │ "es"                                                   │
│ favorite_public_map │ 7c1e2b0a-... (nullable)                                │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Any, Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from photopin.shared.models.base import Base, TimestampMixin
from photopin.shared.models.enums import Language


class User(Base, TimestampMixin):
    """
    User model.

    Attributes:
        id: Unique identifier (UUID v4)
        name / surname: Display names
        email: Login email (unique, indexed)
        password_hash: Bcrypt hashed password, never serialized
        avatar: Optional avatar image URL
        language: Preferred interface language
        favorite_public_map: Optional id of a public map the user likes
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    surname: Mapped[str] = mapped_column(String(255), nullable=False)

    avatar: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    language: Mapped[str] = mapped_column(
        String(8),
        nullable=False,
        default=Language.EN.value,
    )

    # Not a foreign key: the map may be deleted by its author at any time
    favorite_public_map: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def to_dict(self) -> dict[str, Any]:
        """Public projection: no id, no password hash."""
        return {
            "name": self.name,
            "surname": self.surname,
            "email": self.email,
            "avatar": self.avatar,
            "language": self.language,
            "favorite_public_map": (
                str(self.favorite_public_map) if self.favorite_public_map else None
            ),
        }

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email})>"
