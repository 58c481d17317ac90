"""FastAPI router for fights and battle history."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pokedex_api.schemas.battle import BattleRecordRead, FightRequest, FightResult
from pokedex_api.services.battle_service import BattleService
from pokedex_api.services.dependencies import get_battle_service

router = APIRouter()


@router.post("/fight", response_model=FightResult)
async def fight(
    payload: FightRequest | None = None,
    service: BattleService = Depends(get_battle_service),
) -> FightResult:
    """Resolve a fight between two Pokémon and record the outcome.

    An absent body is treated like one naming no participants.
    """

    return await service.fight(payload or FightRequest())


@router.get("/battles", response_model=list[BattleRecordRead])
async def list_battles(
    service: BattleService = Depends(get_battle_service),
) -> list[BattleRecordRead]:
    """Return recorded battles, newest first."""

    return await service.list_battles()
