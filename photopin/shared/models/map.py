"""
Map Entity Model

A user-owned map. Its collections are embedded in the row as an ordered JSON
document instead of living in their own table: a collection only exists
inside its map and is addressed by title.

Model Hierarchy:
================
    Map
       └── collections (JSON list, ordered)
              └── {"title": "Trips", "pins": ["<pin id>", "<pin id>", ...]}

SAMPLE MAP RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id           │ 7c1e2b0a-5d0f-4e55-9a0b-3f6f1f0c2a11                          │
│ title        │ "Iceland 2019"                                                │
│ description  │ "Waterfalls and black beaches"                                │
│ cover_image  │ "https://cdn.example.com/covers/iceland.jpg"                  │
│ is_public    │ true                                                          │
│ author_id    │ 550e8400-e29b-41d4-a716-446655440000                          │
│ collections  │ [{"title": "South coast", "pins": ["a3f...", "c41..."]}]      │
└──────────────────────────────────────────────────────────────────────────────┘

Mutating collections:
=====================
The ORM does not see in-place changes to a JSON value. Always build a new
list and hand it to MapRepository.save_collections(), which flags the column
as modified before flushing.
"""

from typing import Any, Optional
import copy
import uuid

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from photopin.shared.models.base import Base, JSONDocument, TimestampMixin


class Map(Base, TimestampMixin):
    """
    Map model.

    Attributes:
        id: Unique identifier (UUID v4)
        title: Map title
        description: Optional description
        cover_image: Optional cover image URL
        is_public: Public maps can be read by any user
        author_id: Owning user, immutable after creation
        collections: Ordered list of {"title", "pins"} documents
    """

    __tablename__ = "maps"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    cover_image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    collections: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONDocument,
        nullable=False,
        default=list,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # COLLECTION HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    def collection_index(self, title: str) -> int:
        """Position of the first collection with this title, -1 if absent."""
        for index, collection in enumerate(self.collections or []):
            if collection["title"] == title:
                return index
        return -1

    def copy_collections(self) -> list[dict[str, Any]]:
        """Deep copy of the collections, safe to mutate before saving."""
        return copy.deepcopy(self.collections or [])

    def pin_ids(self) -> list[str]:
        """Every pin id referenced by any collection, in order."""
        return [pin_id for collection in self.collections or [] for pin_id in collection["pins"]]

    def is_authored_by(self, user_id: Optional[uuid.UUID]) -> bool:
        return user_id is not None and self.author_id == user_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "cover_image": self.cover_image,
            "is_public": self.is_public,
            "author_id": str(self.author_id),
            "collections": self.copy_collections(),
        }

    def __repr__(self) -> str:
        return f"<Map(id={self.id}, title={self.title!r}, author_id={self.author_id})>"
