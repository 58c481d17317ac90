from __future__ import annotations

from pydantic import BaseModel, Field


class PokemonBase(BaseModel):
    name: str = Field(..., min_length=1, description="Unique creature name")
    type: str = Field(..., description="Elemental type, e.g. 'Fire'")
    health: int
    attack: int
    defense: int


class PokemonCreate(PokemonBase):
    """Payload accepted by ``POST /pokemon``."""


class PokemonUpdate(PokemonBase):
    """Full replacement payload accepted by ``PUT /pokemon/{id}``.

    Every field is required; partial updates are not supported.
    """


class PokemonRead(PokemonBase):
    id: int

    class Config:
        """Pydantic config."""

        from_attributes = True


class MessageResponse(BaseModel):
    message: str
