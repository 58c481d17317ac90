"""Shared fixtures: in-memory SQLite sessions and an ASGI client wired to them."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from pokedex_api.db.connection import get_db
from pokedex_api.db.models import Base, Pokemon
from pokedex_api.main import app


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Single-connection in-memory SQLite engine with the schema created."""
    pytest.importorskip("aiosqlite")
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Provide a session for repository and service level tests."""
    async with session_factory() as db_session:
        yield db_session
        if db_session.in_transaction():
            await db_session.rollback()


@pytest_asyncio.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Create an ``AsyncClient`` whose requests share the in-memory database."""

    async def _override_get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides.clear()
    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_pokemon(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[Pokemon]]:
    """Insert a creature directly through the ORM and return it."""

    async def _make(
        name: str,
        *,
        type: str = "Normal",
        health: int = 50,
        attack: int = 50,
        defense: int = 50,
    ) -> Pokemon:
        async with session_factory() as db_session:
            pokemon = Pokemon(
                name=name, type=type, health=health, attack=attack, defense=defense
            )
            db_session.add(pokemon)
            await db_session.commit()
            return pokemon

    return _make
