"""FastAPI router exposing creature CRUD."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from pokedex_api.schemas.pokemon import (
    MessageResponse,
    PokemonCreate,
    PokemonRead,
    PokemonUpdate,
)
from pokedex_api.services.dependencies import get_pokemon_service
from pokedex_api.services.pokemon_service import PokemonService

router = APIRouter()


@router.get("", response_model=list[PokemonRead])
async def list_pokemon(
    service: PokemonService = Depends(get_pokemon_service),
) -> list[PokemonRead]:
    """Return every stored Pokémon."""

    return await service.list_pokemon()


@router.get("/{pokemon_id}", response_model=PokemonRead)
async def get_pokemon(
    pokemon_id: int,
    service: PokemonService = Depends(get_pokemon_service),
) -> PokemonRead:
    return await service.get_pokemon(pokemon_id)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pokemon(
    payload: PokemonCreate,
    service: PokemonService = Depends(get_pokemon_service),
) -> MessageResponse:
    """Add a Pokémon; 409 when the name is already taken."""

    return await service.create_pokemon(payload)


@router.put("/{pokemon_id}", response_model=MessageResponse)
async def update_pokemon(
    pokemon_id: int,
    payload: PokemonUpdate,
    service: PokemonService = Depends(get_pokemon_service),
) -> MessageResponse:
    """Replace all five fields of an existing Pokémon."""

    return await service.update_pokemon(pokemon_id, payload)
