#!/usr/bin/env python
"""Create the database tables straight from the ORM metadata.

Handy for local SQLite databases; deployed PostgreSQL instances should run
``alembic upgrade head`` instead.
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine

from pokedex_api.db.connection import create_engine
from pokedex_api.db.models import Base
from pokedex_api.main import validate_environment


async def init_db(engine: AsyncEngine | None = None) -> None:
    owns_engine = engine is None
    engine = engine or create_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    if owns_engine:
        await engine.dispose()
    print("✓ Database tables created successfully")


if __name__ == "__main__":
    validate_environment()
    asyncio.run(init_db())
