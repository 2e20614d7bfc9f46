"""
PhotoPin SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── maps (Map[], by author_id)
       │      └── collections (embedded JSON, ordered)
       │             └── pins (Pin ids, ordered)
       └── pins (Pin[], by author_id)

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered user
- Map: User-owned map with embedded collections
- Pin: Geo-tagged photo location

Usage:
======
    from photopin.shared.models import User, Map, Pin
"""

from photopin.shared.models.base import Base, TimestampMixin
from photopin.shared.models.enums import Language
from photopin.shared.models.user import User
from photopin.shared.models.map import Map
from photopin.shared.models.pin import Pin, PIN_TEXT_FIELDS

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "Language",
    # Models
    "User",
    "Map",
    "Pin",
    "PIN_TEXT_FIELDS",
]
