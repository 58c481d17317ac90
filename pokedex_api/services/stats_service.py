"""Service exposing aggregate battle statistics."""

from __future__ import annotations

import logging

from pokedex_api.db.repositories.stats_repository import StatsRepository
from pokedex_api.schemas.stats import NO_BATTLES_SENTINEL, StatsResponse

logger = logging.getLogger(__name__)


class StatsService:
    """Compose the three independent stats reads into one response."""

    def __init__(self, repository: StatsRepository) -> None:
        self._repository = repository

    async def get_stats(self) -> StatsResponse:
        # One AsyncSession cannot run statements concurrently, so the reads
        # are awaited in order.
        total_battles = await self._repository.total_battles()
        total_pokemon = await self._repository.total_pokemon()
        top_winner = await self._repository.top_winner_name()

        logger.debug(
            "Stats computed: battles=%s pokemon=%s top=%s",
            total_battles,
            total_pokemon,
            top_winner,
        )
        return StatsResponse(
            total_battles=total_battles,
            total_pokemon=total_pokemon,
            top_trainer=top_winner if top_winner is not None else NO_BATTLES_SENTINEL,
        )
