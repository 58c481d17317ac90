from fastapi import APIRouter, Depends

from pokedex_api.schemas.stats import StatsResponse
from pokedex_api.services.dependencies import get_stats_service
from pokedex_api.services.stats_service import StatsService

router = APIRouter()


@router.get("", response_model=StatsResponse)
async def stats(
    service: StatsService = Depends(get_stats_service),
) -> StatsResponse:
    return await service.get_stats()
