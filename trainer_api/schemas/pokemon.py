"""
Trainer API — Pokemon Response Schemas
========================================

What:  Pydantic models for creatures and abilities as they appear in JSON.
How:   Field declaration order is the JSON key order; FastAPI serializes these
       directly as response bodies.

Canonical Creature shape:
    {pokemon_id, name, region, abilities}
    - region:    the region display name, never the raw region_id
    - abilities: a list on GET /pokemon; null where abilities are not resolved
                 (inside a trainer roster)
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Ability(BaseModel):
    """A fully resolved ability record."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    ability_id: int = Field(description="Ability identifier")
    name: str = Field(description="Ability name")
    damage: int = Field(description="Numeric damage value")
    status_effect: str = Field(description="Status-effect description")


class Pokemon(BaseModel):
    """A creature with its region resolved to a display name."""

    model_config = ConfigDict(frozen=True)

    pokemon_id: int = Field(description="Creature identifier")
    name: str = Field(description="Creature name")
    region: str = Field(description="Display name of the creature's region")
    abilities: Optional[List[Ability]] = Field(
        default=None,
        description="Resolved abilities; null when not resolved for this endpoint",
    )


class PokemonListResponse(BaseModel):
    """Body of GET /pokemon."""

    pokemons: List[Pokemon]


class AbilityListResponse(BaseModel):
    """Body of GET /pokemon-abilities/{id}."""

    ability: List[Ability]
