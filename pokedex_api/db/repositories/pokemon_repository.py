"""Creature persistence: listing, lookups and full-record writes."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from pokedex_api.db.models import Pokemon
from pokedex_api.db.repositories.base import BaseRepository
from pokedex_api.schemas.pokemon import PokemonCreate, PokemonUpdate


class PokemonRepository(BaseRepository):
    """SQLAlchemy access to the ``pokemon`` table."""

    async def list_pokemon(self) -> Sequence[Pokemon]:
        """Return every creature in insertion (primary key) order."""

        result = await self._session.execute(select(Pokemon).order_by(Pokemon.id))
        return result.scalars().all()

    async def get_pokemon(self, pokemon_id: int) -> Pokemon | None:
        return await self._session.get(Pokemon, pokemon_id)

    async def get_by_name(self, name: str) -> Pokemon | None:
        result = await self._session.execute(
            select(Pokemon).where(Pokemon.name == name)
        )
        return result.scalars().first()

    async def get_pair(self, first_id: int, second_id: int) -> Sequence[Pokemon]:
        """Fetch both fight participants in a single ``IN`` lookup.

        Rows come back ordered by id, not by argument position, and passing
        the same id twice yields a single row.
        """

        result = await self._session.execute(
            select(Pokemon)
            .where(Pokemon.id.in_((first_id, second_id)))
            .order_by(Pokemon.id)
        )
        return result.scalars().all()

    async def create_pokemon(self, payload: PokemonCreate) -> Pokemon:
        """Insert a creature and flush so unique violations surface immediately."""

        pokemon = Pokemon(
            name=payload.name,
            type=payload.type,
            health=payload.health,
            attack=payload.attack,
            defense=payload.defense,
        )
        self._session.add(pokemon)
        await self._session.flush()
        return pokemon

    async def update_pokemon(
        self, pokemon: Pokemon, payload: PokemonUpdate
    ) -> Pokemon:
        """Overwrite all five mutable fields of ``pokemon``."""

        pokemon.name = payload.name
        pokemon.type = payload.type
        pokemon.health = payload.health
        pokemon.attack = payload.attack
        pokemon.defense = payload.defense
        await self._session.flush()
        return pokemon
