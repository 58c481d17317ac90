"""FastAPI dependency wiring for the API services.

Keeping dependency factories out of the service modules leaves the services
free of web-layer concerns, so tests and scripts can build them directly.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pokedex_api.db.connection import get_db
from pokedex_api.db.repositories import (
    BattleRepository,
    PokemonRepository,
    StatsRepository,
)
from pokedex_api.services.battle_service import BattleService
from pokedex_api.services.pokemon_service import PokemonService
from pokedex_api.services.stats_service import StatsService


def get_pokemon_service(session: AsyncSession = Depends(get_db)) -> PokemonService:
    """Provide a :class:`PokemonService` bound to the request session."""

    return PokemonService(PokemonRepository(session))


def get_battle_service(session: AsyncSession = Depends(get_db)) -> BattleService:
    """Wire both repositories for fight resolution onto one session."""

    return BattleService(
        participants=PokemonRepository(session),
        battles=BattleRepository(session),
    )


def get_stats_service(session: AsyncSession = Depends(get_db)) -> StatsService:
    return StatsService(StatsRepository(session))


__all__ = ["get_battle_service", "get_pokemon_service", "get_stats_service"]
