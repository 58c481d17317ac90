"""Pydantic DTOs backing the ``/stats`` endpoint."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, Field

NO_BATTLES_SENTINEL: Final[str] = "No battles yet"


class StatsResponse(BaseModel):
    """Aggregate counters serialized with camelCase keys."""

    total_battles: int = Field(..., alias="totalBattles", ge=0)
    total_pokemon: int = Field(..., alias="totalPokemon", ge=0)
    top_trainer: str = Field(
        NO_BATTLES_SENTINEL,
        alias="topTrainer",
        description=(
            "Name of the creature with the most recorded wins, or the"
            " 'No battles yet' sentinel when no battles exist."
        ),
    )

    class Config:
        """Pydantic config."""

        populate_by_name = True
