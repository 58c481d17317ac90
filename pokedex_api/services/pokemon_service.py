"""Business rules for creating, updating and listing creatures."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pokedex_api.db.models import Pokemon
from pokedex_api.schemas.pokemon import (
    MessageResponse,
    PokemonCreate,
    PokemonRead,
    PokemonUpdate,
)
from pokedex_api.services.errors import ConflictError, NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "A Pokémon with this name already exists."
NOT_FOUND_MESSAGE = "Pokémon not found"
CREATED_MESSAGE = "Pokémon added successfully!"
UPDATED_MESSAGE = "Pokémon updated successfully!"
SAVE_FAILED_MESSAGE = "Error saving the Pokémon"


class PokemonRepositoryProtocol(Protocol):
    async def list_pokemon(self) -> list[Pokemon]: ...

    async def get_pokemon(self, pokemon_id: int) -> Pokemon | None: ...

    async def get_by_name(self, name: str) -> Pokemon | None: ...

    async def create_pokemon(self, payload: PokemonCreate) -> Pokemon: ...

    async def update_pokemon(
        self, pokemon: Pokemon, payload: PokemonUpdate
    ) -> Pokemon: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class PokemonService:
    """Coordinates creature CRUD on top of :class:`PokemonRepository`."""

    def __init__(self, repository: PokemonRepositoryProtocol) -> None:
        self._repository = repository

    async def list_pokemon(self) -> list[PokemonRead]:
        rows = await self._repository.list_pokemon()
        return [PokemonRead.model_validate(row) for row in rows]

    async def get_pokemon(self, pokemon_id: int) -> PokemonRead:
        pokemon = await self._repository.get_pokemon(pokemon_id)
        if pokemon is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, detail=f"id={pokemon_id}")
        return PokemonRead.model_validate(pokemon)

    async def create_pokemon(self, payload: PokemonCreate) -> MessageResponse:
        """Insert a creature unless its name is already taken.

        The name lookup answers the common case; the unique index answers a
        concurrent insert that slipped past the lookup.
        """

        existing = await self._repository.get_by_name(payload.name)
        if existing is not None:
            logger.info("Rejected duplicate Pokémon name %r", payload.name)
            raise ConflictError(DUPLICATE_NAME_MESSAGE, detail=f"name={payload.name!r}")

        try:
            pokemon = await self._repository.create_pokemon(payload)
            await self._repository.commit()
        except IntegrityError as exc:
            await self._repository.rollback()
            logger.warning(
                "Unique constraint rejected Pokémon %r: %s", payload.name, exc.orig
            )
            raise ConflictError(
                DUPLICATE_NAME_MESSAGE, detail=f"name={payload.name!r}"
            ) from exc
        except SQLAlchemyError as exc:
            await self._repository.rollback()
            logger.error("Failed to save Pokémon %r: %s", payload.name, exc)
            raise PersistenceError(SAVE_FAILED_MESSAGE) from exc

        logger.info("Created Pokémon %s (%s)", pokemon.id, pokemon.name)
        return MessageResponse(message=CREATED_MESSAGE)

    async def update_pokemon(
        self, pokemon_id: int, payload: PokemonUpdate
    ) -> MessageResponse:
        """Overwrite all fields of an existing creature."""

        pokemon = await self._repository.get_pokemon(pokemon_id)
        if pokemon is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, detail=f"id={pokemon_id}")

        try:
            await self._repository.update_pokemon(pokemon, payload)
            await self._repository.commit()
        except IntegrityError as exc:
            await self._repository.rollback()
            logger.warning(
                "Unique constraint rejected rename of Pokémon %s to %r",
                pokemon_id,
                payload.name,
            )
            raise ConflictError(
                DUPLICATE_NAME_MESSAGE, detail=f"name={payload.name!r}"
            ) from exc
        except SQLAlchemyError as exc:
            await self._repository.rollback()
            logger.error("Failed to update Pokémon %s: %s", pokemon_id, exc)
            raise PersistenceError(SAVE_FAILED_MESSAGE) from exc

        logger.info("Updated Pokémon %s", pokemon_id)
        return MessageResponse(message=UPDATED_MESSAGE)
