"""Base repository utilities shared across all repository implementations."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """Base repository holding the request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        """Commit pending writes so failures surface before the response is built."""

        await self._session.commit()

    async def rollback(self) -> None:
        """Discard the pending transaction after a failed flush or commit."""

        await self._session.rollback()
