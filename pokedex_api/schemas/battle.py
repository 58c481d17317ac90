from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt

from pokedex_api.schemas.pokemon import PokemonRead


class FightRequest(BaseModel):
    """Body of ``POST /fight``.

    Both identifiers are optional at the schema level so the service can
    answer a missing participant with its own 400 message.
    """

    pokemon1_id: StrictInt | None = Field(None, description="First participant id")
    pokemon2_id: StrictInt | None = Field(None, description="Second participant id")


class FightResult(BaseModel):
    winner: PokemonRead


class BattleRecordRead(BaseModel):
    id: int
    pokemon1_id: int
    pokemon2_id: int
    winner_id: int
    winner_name: str | None = None
    fought_at: datetime | None = None

    class Config:
        """Pydantic config."""

        from_attributes = True
