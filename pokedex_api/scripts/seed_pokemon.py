#!/usr/bin/env python
"""Seed Pokémon records from a JSONL file.

Each line must hold ``name``, ``type``, ``health``, ``attack`` and ``defense``.
Names already stored are skipped so the script can be re-run safely.

Usage:
    python -m pokedex_api.scripts.seed_pokemon ./data/fixtures/pokemon.jsonl
    python -m pokedex_api.scripts.seed_pokemon ./data/fixtures/pokemon.jsonl --limit 20 --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from pokedex_api.db.connection import (
    dispose_engine,
    get_database_type,
    get_session_context,
)
from pokedex_api.db.repositories import PokemonRepository
from pokedex_api.schemas.pokemon import PokemonCreate


async def seed_pokemon(
    jsonl_path: Path,
    session: AsyncSession,
    *,
    limit: int | None = None,
    dry_run: bool = False,
) -> tuple[int, int]:
    """Load creatures from ``jsonl_path`` into the database.

    Args:
        jsonl_path: Path to JSONL file with one creature per line
        session: Session the inserts are issued on; committed on success
        limit: Maximum number of creatures to load
        dry_run: If True, validate without inserting

    Returns:
        Tuple of (loaded_count, skipped_count)
    """
    if not jsonl_path.exists():
        print(f"❌ File not found: {jsonl_path}", file=sys.stderr)
        return 0, 0

    repository = PokemonRepository(session)
    loaded_count = 0
    skipped_count = 0
    seen_names: set[str] = set()

    with open(jsonl_path, encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            if limit is not None and loaded_count >= limit:
                break
            if not line.strip():
                continue

            try:
                payload = PokemonCreate.model_validate(json.loads(line))
            except json.JSONDecodeError as e:
                print(f"❌ Line {line_num}: Invalid JSON: {e}", file=sys.stderr)
                skipped_count += 1
                continue
            except ValidationError as e:
                print(
                    f"⚠️  Line {line_num}: {e.error_count()} invalid field(s), skipping",
                    file=sys.stderr,
                )
                skipped_count += 1
                continue

            if payload.name in seen_names or await repository.get_by_name(payload.name):
                print(f"⚠️  Line {line_num}: {payload.name} already exists, skipping")
                skipped_count += 1
                continue
            seen_names.add(payload.name)

            if dry_run:
                print(f"✓ Would load: {payload.name}")
            else:
                await repository.create_pokemon(payload)
            loaded_count += 1

    if not dry_run:
        await session.commit()

    return loaded_count, skipped_count


async def main() -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Seed Pokémon records from JSONL")
    parser.add_argument(
        "jsonl_path",
        nargs="?",
        type=Path,
        default=Path("./data/fixtures/pokemon.jsonl"),
        help="Path to JSONL file (default: ./data/fixtures/pokemon.jsonl)",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of records to load")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate data without inserting into database",
    )
    args = parser.parse_args()

    print(f"🗄️  Database type detected: {get_database_type().upper()}")
    print(f"📂 Seed source: {args.jsonl_path}")
    if args.dry_run:
        print("🔍 Dry run mode (no changes will be made)")
    print()

    async with get_session_context() as session:
        loaded, skipped = await seed_pokemon(
            args.jsonl_path, session, limit=args.limit, dry_run=args.dry_run
        )
    await dispose_engine()

    print("=" * 50)
    if args.dry_run:
        print(f"✓ Validated {loaded} Pokémon")
    else:
        print(f"✅ Loaded {loaded} Pokémon")
    if skipped > 0:
        print(f"⚠️  Skipped {skipped} records")
    print("=" * 50)

    return 0 if skipped == 0 else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
