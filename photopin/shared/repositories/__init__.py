"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]   ← Generic CRUD operations
         │
         ├── UserRepository     ← Lookup by email
         ├── MapRepository      ← Maps and embedded collections
         └── PinRepository      ← Pins and their cascades

Usage Example:
==============
    from photopin.shared.repositories import MapRepository, PinRepository

    async def drop_map(db: AsyncSession, pin_map: Map) -> None:
        await PinRepository(db).delete_by_map(pin_map.id)
        await MapRepository(db).delete(pin_map)
"""

from photopin.shared.repositories.base import BaseRepository
from photopin.shared.repositories.user_repository import UserRepository
from photopin.shared.repositories.map_repository import MapRepository
from photopin.shared.repositories.pin_repository import PinRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "MapRepository",
    "PinRepository",
]
