"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns and rolled back if it
raises, so every multi-step operation of a request is one transaction.

Usage:
======
    from photopin.api.dependencies.database import DbSession

    @router.get("/health/db")
    async def check(db: DbSession):
        await db.execute(text("SELECT 1"))
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from photopin.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield an async database session for the duration of the request.

    Tests override this dependency to bind the app to their own engine.
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
