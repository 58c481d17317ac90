from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from urllib.parse import urlsplit

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pokedex_api.settings import POSTGRES_ASYNC_PREFIX, get_settings

logger = logging.getLogger(__name__)


def _validate_database_url(database_url: str) -> str:
    """Perform lightweight structural checks on the resolved database URL.

    SQLite URLs are accepted as-is; PostgreSQL URLs must name both a host and a
    database so misconfigurations fail at startup with a readable message
    instead of surfacing as a driver error on the first request.
    """

    if database_url.startswith("sqlite"):
        return database_url

    parts = urlsplit(database_url)
    if not parts.hostname or parts.path in ("", "/"):
        raise RuntimeError(
            "DATABASE_URL appears malformed. Verify the host and database name are present."
        )

    return database_url


def get_database_url() -> str:
    """Return the async SQLAlchemy URL the application connects to."""

    return _validate_database_url(get_settings().resolved_database_url)


def get_database_type() -> str:
    """Return the active database backend identifier (``postgresql`` or ``sqlite``)."""

    url = get_database_url()
    if url.startswith(POSTGRES_ASYNC_PREFIX):
        return "postgresql"
    return "sqlite"


def create_engine(url: str | None = None) -> AsyncEngine:
    """Create the async SQLAlchemy engine.

    PostgreSQL engines receive a warm connection pool sized from settings;
    SQLite keeps SQLAlchemy's default pool because the driver serializes
    writes anyway.
    """

    settings = get_settings()
    url = url or get_database_url()

    engine_kwargs: dict[str, Any] = {"future": True, "echo": False}
    if url.startswith(POSTGRES_ASYNC_PREFIX):
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=1800,  # Recycle connections every 30 min
            pool_timeout=30,
        )

    engine = create_async_engine(url, **engine_kwargs)

    try:
        from pokedex_api.monitoring import setup_query_monitoring

        setup_query_monitoring(
            engine,
            slow_query_threshold=settings.slow_query_threshold,
        )
    except Exception as exc:  # pragma: no cover - monitoring is optional at runtime
        logger.warning(f"Failed to enable query monitoring: {exc}")

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@asynccontextmanager
async def begin_engine_transaction(engine: AsyncEngine) -> AsyncIterator[Any]:
    """Yield a connection from ``engine.begin()`` with mock-friendly support."""

    begin_result = engine.begin()
    if asyncio.iscoroutine(begin_result):
        begin_context = await begin_result
    else:
        begin_context = begin_result

    async with begin_context as connection:
        yield connection


# Global engine/session instances for FastAPI dependency injection
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Get or create the global engine instance."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Lazily create a session factory bound to the shared engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


async def dispose_engine() -> None:
    """Close every pooled connection and forget the global engine."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency to provide database session.

    Services commit their own writes before returning so a failed commit
    reaches the client as an error response. The closing commit here only
    ends the read transaction; the session is rolled back when the handler
    raises.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def get_session_context() -> AsyncIterator[AsyncSession]:
    """
    Async context manager for scripts/CLI tasks that need manual session control.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
