"""
Base Repository

Generic CRUD operations shared by every entity repository.

What This Provides:
===================
- get(id)          → Fetch single record by UUID
- get_by_ids()     → Fetch multiple records by UUIDs
- list()           → List records with simple equality filters
- count()          → Count records with filtering
- create()         → Create new record
- update()         → Update existing record
- delete()         → Delete one record
- delete_where()   → Delete every record matching a set of conditions

Generic Type Pattern:
=====================
    class PinRepository(BaseRepository[Pin]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Pin, session)

    repo = PinRepository(db)
    pin = await repo.get(pin_id)  # Returns Pin, not Any

flush() vs commit():
====================
Repositories only flush(). The request-level get_db() dependency commits
once the handler returns and rolls back on any exception, so a multi-step
operation (e.g. deleting a map's pins and then the map) lands atomically.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from photopin.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        SQL Generated:
            SELECT * FROM maps WHERE id = '7c1e2b0a-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: list[UUID]) -> list[ModelType]:
        """
        Get multiple records by their UUIDs in a single IN query.

        Returns:
            List of model instances (may be fewer than requested if some not found).
            Order is not guaranteed.
        """
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())

    async def list(
        self,
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
    ) -> list[ModelType]:
        """
        List records with optional equality filters and ordering.

        Example:
            maps = await repo.list(filters={"author_id": user_id}, order_by="created_at")
        """
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            query = query.order_by(order_field.desc() if order_desc else order_field)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """Count records matching simple equality filters."""
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance, flushes to get DB-generated values and refreshes it.
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """
        Write the given fields on an already loaded instance.

        Unlike a partial update, every keyword is written, None included;
        callers decide which fields to pass.
        """
        for field, value in kwargs.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, instance: ModelType) -> None:
        """Delete one loaded instance."""
        await self.session.delete(instance)
        await self.session.flush()

    async def delete_where(self, *conditions: ColumnElement[bool]) -> int:
        """
        Delete every record matching all conditions in one statement.

        Returns:
            Number of deleted rows

        SQL Generated:
            DELETE FROM pins WHERE map_id = '7c1e...'
        """
        result = await self.session.execute(
            delete(self.model).where(*conditions).execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount or 0
