"""
Database Module

Database connectivity and session management for PhotoPin.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to services, which build their repositories on it
        ▼
    UserRepository / MapRepository / PinRepository
        │  SQL
        ▼
    PostgreSQL (SQLite in tests)

Usage in FastAPI:
=================
    from fastapi import Depends
    from photopin.shared.db import get_db

    @app.get("/maps")
    async def list_maps(db: AsyncSession = Depends(get_db)):
        return await MapService(db).retrieve_user_maps(user_id)
"""

from photopin.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
