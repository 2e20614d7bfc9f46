"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. The services run on a
session of that database; the HTTP client runs the FastAPI app with get_db
overridden to open sessions on the same engine.
"""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from photopin.api.dependencies.database import get_db
from photopin.api.main import create_application
from photopin.shared.models import Base
from photopin.shared.services import LogicPolicy, MapService, PinService, UserService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def policy():
    """Default switches; tests override through make_services(policy=...)."""
    return LogicPolicy()


@pytest.fixture
def make_services(session):
    def build(**switches):
        policy = LogicPolicy(**switches)
        return (
            UserService(session, policy=policy),
            MapService(session, policy=policy),
            PinService(session, policy=policy),
        )

    return build


@pytest.fixture
def user_service(session, policy):
    return UserService(session, policy=policy)


@pytest.fixture
def map_service(session, policy):
    return MapService(session, policy=policy)


@pytest.fixture
def pin_service(session, policy):
    return PinService(session, policy=policy)


@pytest.fixture
async def user_id(user_service):
    return await user_service.register_user("Ansel", "Adams", "ansel@mail.com", "yosemite")


@pytest.fixture
async def other_user_id(user_service):
    return await user_service.register_user("Vivian", "Maier", "vivian@mail.com", "chicago")


@pytest.fixture
async def map_id(map_service, user_id):
    return await map_service.create_map(user_id, "Iceland", description="Ring road")


@pytest.fixture
def pin_data():
    return {
        "title": "Skógafoss",
        "description": "Waterfall on the Skógá river",
        "best_time_of_day": "sunset",
        "coordinates": {"latitude": 63.5321, "longitude": -19.5114},
    }


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def client(session_factory):
    app = create_application()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def auth_headers(client):
    """Register and log in a user; returns its bearer header."""
    await client.post(
        "/users",
        json={"name": "Ansel", "surname": "Adams", "email": "ansel@mail.com", "password": "yosemite"},
    )
    response = await client.post("/auth", json={"email": "ansel@mail.com", "password": "yosemite"})
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
