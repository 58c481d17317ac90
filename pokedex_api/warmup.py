"""Startup checks that open the connection pool before the first request.

The service owns no other long-lived resources, so warming up means pinging
the database and confirming the expected tables exist.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine

from pokedex_api.db.connection import begin_engine_transaction
from pokedex_api.db.models import Base

logger = logging.getLogger(__name__)


async def warmup_database(
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> bool:
    """Ping the database with ``SELECT 1``; return whether it answered.

    Failures are logged, not raised: the service still starts and each
    request reports its own store error.
    """
    try:
        if resolve_engine is None:
            from pokedex_api.db.connection import get_engine as resolve_engine

        start = time.time()
        engine = resolve_engine()

        async with begin_engine_transaction(engine) as conn:
            await conn.execute(text("SELECT 1"))

        elapsed = (time.time() - start) * 1000
        logger.info(f"✓ Database connection warmed up ({elapsed:.0f}ms)")
        return True
    except Exception as e:
        logger.warning(f"Database warmup failed: {e}")
        return False


async def verify_schema(
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> list[str]:
    """Return the ORM tables missing from the database, logging a warning."""

    if resolve_engine is None:
        from pokedex_api.db.connection import get_engine as resolve_engine

    expected = set(Base.metadata.tables)

    def _existing_tables(sync_conn) -> set[str]:
        return set(inspect(sync_conn).get_table_names())

    try:
        async with begin_engine_transaction(resolve_engine()) as conn:
            existing = await conn.run_sync(_existing_tables)
    except Exception as e:
        logger.warning(f"Schema verification failed: {e}")
        return sorted(expected)

    missing = sorted(expected - existing)
    if missing:
        logger.warning(
            "Missing tables %s - run `alembic upgrade head` or scripts/init_db.py",
            ", ".join(missing),
        )
    return missing


async def warmup_all(
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> None:
    """Run every warmup step and log the total time spent."""
    logger.info("=" * 60)
    logger.info("Warming up database connections...")
    logger.info("=" * 60)

    start = time.time()

    if await warmup_database(resolve_engine=resolve_engine):
        await verify_schema(resolve_engine=resolve_engine)

    total_elapsed = (time.time() - start) * 1000
    logger.info(f"✓ Warmup complete ({total_elapsed:.0f}ms)")
