"""Slow-query logging hooked into SQLAlchemy engine events."""

import logging
import time
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

_MAX_LOGGED_STATEMENT = 500


def setup_query_monitoring(
    engine: Engine,
    slow_query_threshold: float = 0.1,
) -> None:
    """Log a warning for every statement slower than ``slow_query_threshold``.

    Args:
        engine: Async engine (its ``sync_engine`` receives the listeners)
        slow_query_threshold: Seconds after which a statement counts as slow
    """
    if not hasattr(engine, "sync_engine"):
        logger.warning("Engine does not have sync_engine attribute, skipping query monitoring")
        return

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def receive_before_cursor_execute(
        conn: Any,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        conn.info.setdefault("query_start_time", []).append(time.perf_counter())

    @event.listens_for(engine.sync_engine, "after_cursor_execute")
    def receive_after_cursor_execute(
        conn: Any,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        elapsed = time.perf_counter() - conn.info["query_start_time"].pop()
        if elapsed <= slow_query_threshold:
            return

        truncated = statement[:_MAX_LOGGED_STATEMENT]
        if len(statement) > _MAX_LOGGED_STATEMENT:
            truncated += "..."

        logger.warning(
            f"Slow query detected ({elapsed:.3f}s): {truncated}",
            extra={
                "duration_seconds": elapsed,
                "query": statement,
                "threshold_seconds": slow_query_threshold,
            },
        )

    logger.info(
        f"Query performance monitoring enabled "
        f"(slow query threshold: {slow_query_threshold}s)"
    )
