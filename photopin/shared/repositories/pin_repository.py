"""
Pin Repository

Database operations for pins.

Common Operations:
==================
- delete_owned()      → Delete one pin only if it belongs to the user
- delete_by_ids()     → Cascade from a removed collection
- delete_by_map()     → Cascade from a removed map
- delete_by_author()  → Cascade from a removed user
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from photopin.shared.repositories.base import BaseRepository
from photopin.shared.models.pin import Pin


class PinRepository(BaseRepository[Pin]):
    """Repository for Pin database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Pin, session)

    async def delete_owned(self, pin_id: UUID, author_id: UUID) -> Optional[Pin]:
        """
        Delete a pin only when both its id and its author match.

        A pin of another user is indistinguishable from a missing one.

        Returns:
            The deleted pin, or None when nothing matched
        """
        result = await self.session.execute(
            select(Pin).where(Pin.id == pin_id, Pin.author_id == author_id)
        )
        pin = result.scalar_one_or_none()
        if pin is None:
            return None

        await self.delete(pin)
        return pin

    async def delete_by_ids(self, ids: list[UUID]) -> int:
        if not ids:
            return 0
        return await self.delete_where(Pin.id.in_(ids))

    async def delete_by_map(self, map_id: UUID) -> int:
        return await self.delete_where(Pin.map_id == map_id)

    async def delete_by_author(self, author_id: UUID) -> int:
        return await self.delete_where(Pin.author_id == author_id)
