"""Battle history persistence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from pokedex_api.db.models import BattleRecord
from pokedex_api.db.repositories.base import BaseRepository


class BattleRepository(BaseRepository):
    """SQLAlchemy access to the ``battle_history`` table."""

    async def record_battle(
        self, *, pokemon1_id: int, pokemon2_id: int, winner_id: int
    ) -> BattleRecord:
        record = BattleRecord(
            pokemon1_id=pokemon1_id,
            pokemon2_id=pokemon2_id,
            winner_id=winner_id,
        )
        self._session.add(record)
        await self._session.flush()
        return record

    async def list_battles(self) -> Sequence[BattleRecord]:
        """Return battle records newest first with the winner eagerly loaded."""

        result = await self._session.execute(
            select(BattleRecord)
            .options(selectinload(BattleRecord.winner))
            .order_by(BattleRecord.id.desc())
        )
        return result.scalars().all()
