"""Pydantic schemas for API requests and responses."""

from pokedex_api.schemas.battle import (  # noqa: F401
    BattleRecordRead,
    FightRequest,
    FightResult,
)
from pokedex_api.schemas.pokemon import (  # noqa: F401
    MessageResponse,
    PokemonCreate,
    PokemonRead,
    PokemonUpdate,
)
from pokedex_api.schemas.stats import NO_BATTLES_SENTINEL, StatsResponse  # noqa: F401
