"""
Trainer API — Trainer SQLAlchemy Models
=========================================

What:  ORM models for the `trainer` table and the `trainerspokemon`
       ownership join table.
Who:   Used by the statement builders and by Alembic / the test suite to
       create the schema.

Ownership rows carry a surrogate `id` so the same creature can be linked to a
trainer more than once, and so rosters can be listed in link order.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from trainer_api.database import Base


class Trainer(Base):
    """A trainer; may own zero or more pokemon through `trainerspokemon`."""

    __tablename__ = "trainer"

    # Store-assigned (SERIAL on PostgreSQL, ROWID alias on SQLite)
    trainer_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    gym_leader: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Trainer(trainer_id={self.trainer_id}, name='{self.name}')>"


class TrainerPokemon(Base):
    """Ownership link between a trainer and a pokemon (many-to-many)."""

    __tablename__ = "trainerspokemon"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trainer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("trainer.trainer_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    pokemon_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pokemon.pokemon_id"),
        nullable=False,
    )
