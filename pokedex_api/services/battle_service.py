"""Fight resolution between two stored creatures."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError

from pokedex_api.db.models import BattleRecord, Pokemon
from pokedex_api.schemas.battle import BattleRecordRead, FightRequest, FightResult
from pokedex_api.schemas.pokemon import PokemonRead
from pokedex_api.services.errors import (
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MISSING_PARTICIPANT_MESSAGE = "Two Pokémon are required"
PARTICIPANT_NOT_FOUND_MESSAGE = "One or both Pokémon not found"
RECORD_FAILED_MESSAGE = "Error recording the fight"


def resolve_winner(first: Pokemon, second: Pokemon) -> Pokemon:
    """Return the creature with strictly greater attack.

    Equal attack goes to ``second``; callers must pass participants in the
    order the store returned them.
    """

    return first if first.attack > second.attack else second


class ParticipantLookup(Protocol):
    async def get_pair(self, first_id: int, second_id: int) -> Sequence[Pokemon]: ...


class BattleRecorder(Protocol):
    async def record_battle(
        self, *, pokemon1_id: int, pokemon2_id: int, winner_id: int
    ) -> BattleRecord: ...

    async def list_battles(self) -> Sequence[BattleRecord]: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class BattleService:
    """Resolves fights and persists their outcome."""

    def __init__(
        self, *, participants: ParticipantLookup, battles: BattleRecorder
    ) -> None:
        self._participants = participants
        self._battles = battles

    async def fight(self, request: FightRequest) -> FightResult:
        first_id, second_id = request.pokemon1_id, request.pokemon2_id
        if not first_id or not second_id:
            raise ValidationError(MISSING_PARTICIPANT_MESSAGE)

        rows = await self._participants.get_pair(first_id, second_id)
        if len(rows) < 2:
            raise NotFoundError(
                PARTICIPANT_NOT_FOUND_MESSAGE,
                detail=f"pokemon1_id={first_id}, pokemon2_id={second_id}",
            )

        first, second = rows[0], rows[1]
        winner = resolve_winner(first, second)

        try:
            record = await self._battles.record_battle(
                pokemon1_id=first_id,
                pokemon2_id=second_id,
                winner_id=winner.id,
            )
            await self._battles.commit()
        except SQLAlchemyError as exc:
            await self._battles.rollback()
            logger.error(
                "Failed to record fight %s vs %s: %s", first_id, second_id, exc
            )
            raise PersistenceError(RECORD_FAILED_MESSAGE) from exc

        logger.info(
            "Battle %s: %s vs %s, winner %s",
            record.id,
            first.name,
            second.name,
            winner.name,
        )
        return FightResult(winner=PokemonRead.model_validate(winner))

    async def list_battles(self) -> list[BattleRecordRead]:
        records = await self._battles.list_battles()
        return [
            BattleRecordRead(
                id=record.id,
                pokemon1_id=record.pokemon1_id,
                pokemon2_id=record.pokemon2_id,
                winner_id=record.winner_id,
                winner_name=record.winner.name if record.winner else None,
                fought_at=record.fought_at,
            )
            for record in records
        ]
