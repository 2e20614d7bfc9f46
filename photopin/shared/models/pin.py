"""
Pin Entity Model

A geo-tagged photo location with descriptive and travel metadata.

A pin is referenced by id from exactly one collection of its map
(Map.collections[i]["pins"]). The reference is not a foreign key: deleting a
pin directly leaves the id in place, and the populated map view skips ids
whose pin no longer exists.

SAMPLE PIN RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                 │ a3f0c6de-...                                            │
│ title              │ "Skógafoss"                                             │
│ url_image          │ "https://cdn.example.com/pins/skogafoss.jpg"            │
│ best_time_of_year  │ "Summer"                                                │
│ best_time_of_day   │ "Sunset"                                                │
│ photography_tips   │ "Bring a ND filter"                                     │
│ travel_information │ "Parking next to the fall"                              │
│ latitude/longitude │ 63.5321 / -19.5114                                      │
│ author_id          │ 550e8400-...                                            │
│ map_id             │ 7c1e2b0a-...                                            │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Any, Optional
import uuid

from sqlalchemy import Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from photopin.shared.models.base import Base, TimestampMixin


# Text fields rewritten by PinService.update_pin
PIN_TEXT_FIELDS = (
    "title",
    "description",
    "url_image",
    "best_time_of_year",
    "best_time_of_day",
    "photography_tips",
    "travel_information",
)


class Pin(Base, TimestampMixin):
    """
    Pin model.

    Attributes:
        id: Unique identifier (UUID v4)
        title .. travel_information: Free-text metadata (see PIN_TEXT_FIELDS)
        latitude / longitude: Coordinates in decimal degrees
        author_id: Owning user
        map_id: Map whose collection references this pin
    """

    __tablename__ = "pins"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    url_image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    best_time_of_year: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    best_time_of_day: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    photography_tips: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    travel_information: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOCATION
    # ═══════════════════════════════════════════════════════════════════════════

    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # OWNERSHIP
    # ═══════════════════════════════════════════════════════════════════════════

    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    map_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("maps.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": str(self.id)}
        data.update({field: getattr(self, field) for field in PIN_TEXT_FIELDS})
        data["coordinates"] = {
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        data["author_id"] = str(self.author_id)
        data["map_id"] = str(self.map_id)
        return data

    def __repr__(self) -> str:
        return f"<Pin(id={self.id}, title={self.title!r}, map_id={self.map_id})>"
