"""Initial schema

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2025-11-04 09:12:41.512930

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2d7b10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # Create pokemon table; the unique constraint on name backs the 409 path
    op.create_table(
        "pokemon",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("health", sa.Integer(), nullable=False),
        sa.Column("attack", sa.Integer(), nullable=False),
        sa.Column("defense", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # Create battle_history table
    op.create_table(
        "battle_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pokemon1_id", sa.Integer(), nullable=False),
        sa.Column("pokemon2_id", sa.Integer(), nullable=False),
        sa.Column("winner_id", sa.Integer(), nullable=False),
        sa.Column("fought_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["pokemon1_id"], ["pokemon.id"]),
        sa.ForeignKeyConstraint(["pokemon2_id"], ["pokemon.id"]),
        sa.ForeignKeyConstraint(["winner_id"], ["pokemon.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_battle_history_winner_id"),
        "battle_history",
        ["winner_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_battle_history_winner_id"), table_name="battle_history")
    op.drop_table("battle_history")
    op.drop_table("pokemon")
