"""
Map Repository

Database operations for maps and their embedded collections.

Common Operations:
==================
- list_by_author()     → Every map of a user, oldest first
- save_collections()   → Replace the embedded collections document
- delete_by_author()   → Remove every map of a user
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from photopin.shared.repositories.base import BaseRepository
from photopin.shared.models.map import Map


class MapRepository(BaseRepository[Map]):
    """Repository for Map database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Map, session)

    async def list_by_author(self, author_id: UUID) -> list[Map]:
        """All maps authored by a user, public or private."""
        return await self.list(filters={"author_id": author_id}, order_by="created_at")

    async def save_collections(self, pin_map: Map, collections: list[dict[str, Any]]) -> Map:
        """
        Store a new version of the map's collections.

        The JSON column is flagged explicitly so the UPDATE is emitted even
        though the ORM cannot diff nested values.
        """
        pin_map.collections = collections
        flag_modified(pin_map, "collections")
        await self.session.flush()
        await self.session.refresh(pin_map)
        return pin_map

    async def delete_by_author(self, author_id: UUID) -> int:
        """Delete every map of a user. Returns the number of rows removed."""
        return await self.delete_where(Map.author_id == author_id)
