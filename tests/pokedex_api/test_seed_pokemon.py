"""Tests for the JSONL seeding script."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pokedex_api.db.models import Pokemon
from pokedex_api.scripts.seed_pokemon import seed_pokemon

FIXTURE = Path(__file__).resolve().parents[2] / "data" / "fixtures" / "pokemon.jsonl"


def _write_lines(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _record(name: str, attack: int = 50) -> str:
    return json.dumps(
        {"name": name, "type": "Bug", "health": 40, "attack": attack, "defense": 35}
    )


async def _count(session: AsyncSession) -> int:
    return (await session.execute(select(func.count(Pokemon.id)))).scalar_one()


@pytest.mark.asyncio
async def test_seed_loads_bundled_fixture(session: AsyncSession) -> None:
    loaded, skipped = await seed_pokemon(FIXTURE, session)

    assert (loaded, skipped) == (8, 0)
    assert await _count(session) == 8


@pytest.mark.asyncio
async def test_seed_skips_invalid_and_duplicate_lines(
    session: AsyncSession, tmp_path: Path
) -> None:
    source = _write_lines(
        tmp_path / "seed.jsonl",
        _record("Caterpie"),
        "{broken",
        json.dumps({"name": "Metapod", "type": "Bug"}),
        _record("Caterpie", attack=99),
        "",
        _record("Butterfree", attack=45),
    )

    loaded, skipped = await seed_pokemon(source, session)

    assert (loaded, skipped) == (2, 3)
    names = (await session.execute(select(Pokemon.name).order_by(Pokemon.id))).scalars()
    assert list(names) == ["Caterpie", "Butterfree"]


@pytest.mark.asyncio
async def test_seed_is_rerunnable(session: AsyncSession, tmp_path: Path) -> None:
    source = _write_lines(tmp_path / "seed.jsonl", _record("Weedle"), _record("Kakuna"))

    await seed_pokemon(source, session)
    loaded, skipped = await seed_pokemon(source, session)

    assert (loaded, skipped) == (0, 2)
    assert await _count(session) == 2


@pytest.mark.asyncio
async def test_seed_dry_run_and_limit(session: AsyncSession, tmp_path: Path) -> None:
    source = _write_lines(
        tmp_path / "seed.jsonl", _record("Pidgey"), _record("Spearow"), _record("Doduo")
    )

    loaded, _ = await seed_pokemon(source, session, limit=2, dry_run=True)

    assert loaded == 2
    assert await _count(session) == 0


@pytest.mark.asyncio
async def test_seed_missing_file_loads_nothing(
    session: AsyncSession, tmp_path: Path
) -> None:
    assert await seed_pokemon(tmp_path / "absent.jsonl", session) == (0, 0)


@pytest.mark.asyncio
async def test_seed_zero_limit_loads_nothing(
    session: AsyncSession, tmp_path: Path
) -> None:
    source = _write_lines(tmp_path / "seed.jsonl", _record("Horsea"), _record("Seadra"))

    loaded, skipped = await seed_pokemon(source, session, limit=0)

    assert (loaded, skipped) == (0, 0)
    assert await _count(session) == 0
