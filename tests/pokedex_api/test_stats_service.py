"""Unit tests for :class:`pokedex_api.services.stats_service.StatsService`."""

from __future__ import annotations

import pytest

from pokedex_api.schemas.stats import NO_BATTLES_SENTINEL
from pokedex_api.services.stats_service import StatsService


class StubStatsRepository:
    def __init__(self, battles: int, pokemon: int, top: str | None) -> None:
        self._battles = battles
        self._pokemon = pokemon
        self._top = top

    async def total_battles(self) -> int:
        return self._battles

    async def total_pokemon(self) -> int:
        return self._pokemon

    async def top_winner_name(self) -> str | None:
        return self._top


@pytest.mark.asyncio
async def test_stats_use_sentinel_without_battles() -> None:
    service = StatsService(StubStatsRepository(0, 4, None))

    stats = await service.get_stats()

    assert stats.model_dump(by_alias=True) == {
        "totalBattles": 0,
        "totalPokemon": 4,
        "topTrainer": NO_BATTLES_SENTINEL,
    }


@pytest.mark.asyncio
async def test_stats_report_top_winner() -> None:
    service = StatsService(StubStatsRepository(12, 5, "Gengar"))

    stats = await service.get_stats()

    assert stats.total_battles == 12
    assert stats.total_pokemon == 5
    assert stats.top_trainer == "Gengar"
