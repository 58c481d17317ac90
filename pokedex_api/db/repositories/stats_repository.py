"""Stats repository for aggregate counters over creatures and battles."""

from __future__ import annotations

from sqlalchemy import func, select

from pokedex_api.db.models import BattleRecord, Pokemon
from pokedex_api.db.repositories.base import BaseRepository


class StatsRepository(BaseRepository):
    """Read-only aggregate queries backing ``GET /stats``."""

    async def total_battles(self) -> int:
        result = await self._session.execute(select(func.count(BattleRecord.id)))
        return int(result.scalar_one_or_none() or 0)

    async def total_pokemon(self) -> int:
        result = await self._session.execute(select(func.count(Pokemon.id)))
        return int(result.scalar_one_or_none() or 0)

    async def top_winner_name(self) -> str | None:
        """Return the name of the creature with the most recorded wins.

        Ties on win count resolve alphabetically by name. ``None`` means no
        battle has been recorded yet.
        """

        win_count = func.count(BattleRecord.id).label("win_count")
        stmt = (
            select(Pokemon.name, win_count)
            .select_from(BattleRecord)
            .join(Pokemon, Pokemon.id == BattleRecord.winner_id)
            .group_by(Pokemon.id, Pokemon.name)
            .order_by(win_count.desc(), Pokemon.name.asc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row.name
