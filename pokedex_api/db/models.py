from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Pokemon(Base):
    __tablename__ = "pokemon"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Unique index closes the check-then-insert race on creation.
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    health: Mapped[int] = mapped_column(Integer, nullable=False)
    attack: Mapped[int] = mapped_column(Integer, nullable=False)
    defense: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Pokemon(id={self.id!r}, name={self.name!r})"


class BattleRecord(Base):
    __tablename__ = "battle_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pokemon1_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id"), nullable=False
    )
    pokemon2_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id"), nullable=False
    )
    winner_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id"), nullable=False, index=True
    )
    fought_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    winner: Mapped[Pokemon] = relationship("Pokemon", foreign_keys=[winner_id])
