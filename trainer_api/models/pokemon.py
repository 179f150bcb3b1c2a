"""
Trainer API — Pokemon SQLAlchemy Models
=========================================

What:  ORM models for `pokemon`, `region`, `ability` and the
       `pokemonabilities` join table.
Who:   Used by the statement builders and by Alembic / the test suite.

Table Design:
    - region is a read-only lookup table; this service never writes to it.
    - pokemon.region_id is resolved to region.region_name at read time and is
      never exposed in API responses.
    - pokemonabilities links pokemon to abilities (many-to-many). The surrogate
      `id` keeps link order stable and allows duplicate links.
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from trainer_api.database import Base


class Region(Base):
    """Major area of the world: Kanto, Johto, etc."""

    __tablename__ = "region"

    region_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    region_name: Mapped[str] = mapped_column(Text, nullable=False)


class Pokemon(Base):
    """A catalog creature belonging to exactly one region."""

    __tablename__ = "pokemon"

    pokemon_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    region_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("region.region_id"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Pokemon(pokemon_id={self.pokemon_id}, name='{self.name}')>"


class Ability(Base):
    """A named effect with a damage value and a status-effect description."""

    __tablename__ = "ability"

    ability_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    damage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status_effect: Mapped[str] = mapped_column(Text, nullable=False, default="")


class PokemonAbility(Base):
    """Link between a pokemon and one of its abilities."""

    __tablename__ = "pokemonabilities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pokemon_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pokemon.pokemon_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ability_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ability.ability_id"),
        nullable=False,
    )
