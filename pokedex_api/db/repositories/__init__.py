"""Repository package for the database access layer."""

from pokedex_api.db.repositories.base import BaseRepository
from pokedex_api.db.repositories.battle_repository import BattleRepository
from pokedex_api.db.repositories.pokemon_repository import PokemonRepository
from pokedex_api.db.repositories.stats_repository import StatsRepository

__all__ = [
    "BaseRepository",
    "BattleRepository",
    "PokemonRepository",
    "StatsRepository",
]
