"""
Trainer API — SQL Statement Builders
======================================

What:  Every statement the service sends to the store, built with SQLAlchemy
       Core so caller-supplied values always travel as bound parameters.
How:   Each SELECT names its columns explicitly. The column order declared
       here is the row shape consumers index into; tests pin it.

Fan-out statements (one round trip each):
    select_owned_pokemon_ids, select_pokemon, select_region_name,
    select_ability_ids, select_ability

Join statements (one round trip per assembly step):
    select_rosters, select_region_names, select_pokemon_abilities
"""

from typing import Sequence

from sqlalchemy import Delete, Insert, Select, delete, insert, select

from trainer_api.models.pokemon import Ability, Pokemon, PokemonAbility, Region
from trainer_api.models.trainer import Trainer, TrainerPokemon


# ── Trainer ───────────────────────────────────────────────────────────────

def select_trainers() -> Select:
    """(trainer_id, name, gym_leader) for every trainer."""
    return select(Trainer.trainer_id, Trainer.name, Trainer.gym_leader).order_by(
        Trainer.trainer_id
    )


def select_trainer(trainer_id: int) -> Select:
    """(trainer_id, name, gym_leader) for the trainer with the given id."""
    return select(Trainer.trainer_id, Trainer.name, Trainer.gym_leader).where(
        Trainer.trainer_id == trainer_id
    )


def insert_trainer(name: str, gym_leader: bool) -> Insert:
    return insert(Trainer).values(name=name, gym_leader=gym_leader)


def delete_trainer(trainer_id: int) -> Delete:
    return delete(Trainer).where(Trainer.trainer_id == trainer_id)


def select_owned_pokemon_ids(trainer_id: int) -> Select:
    """(pokemon_id) for each ownership row of a trainer, in link order."""
    return (
        select(TrainerPokemon.pokemon_id)
        .where(TrainerPokemon.trainer_id == trainer_id)
        .order_by(TrainerPokemon.id)
    )


# ── Pokemon / Region ──────────────────────────────────────────────────────

def select_all_pokemon() -> Select:
    """(pokemon_id, name, region_id) for every pokemon."""
    return select(Pokemon.pokemon_id, Pokemon.name, Pokemon.region_id).order_by(
        Pokemon.pokemon_id
    )


def select_pokemon(pokemon_id: int) -> Select:
    """(pokemon_id, name, region_id) for one pokemon."""
    return select(Pokemon.pokemon_id, Pokemon.name, Pokemon.region_id).where(
        Pokemon.pokemon_id == pokemon_id
    )


def select_region_name(region_id: int) -> Select:
    """(region_name) for one region."""
    return select(Region.region_name).where(Region.region_id == region_id)


# ── Ability ───────────────────────────────────────────────────────────────

def select_ability_ids(pokemon_id: int) -> Select:
    """(ability_id) for each ability link of a pokemon, in link order."""
    return (
        select(PokemonAbility.ability_id)
        .where(PokemonAbility.pokemon_id == pokemon_id)
        .order_by(PokemonAbility.id)
    )


def select_ability(ability_id: int) -> Select:
    """(ability_id, name, damage, status_effect) for one ability."""
    return select(
        Ability.ability_id, Ability.name, Ability.damage, Ability.status_effect
    ).where(Ability.ability_id == ability_id)


# ── Join Variants ─────────────────────────────────────────────────────────

def select_rosters(trainer_ids: Sequence[int]) -> Select:
    """
    One row per ownership link of the given trainers.

    Columns: (trainer_id, link_pokemon_id, pokemon_id, name, region_id,
    region_name). Outer joins keep dangling links visible: pokemon_id is
    NULL when the owned pokemon row is missing, region_name is NULL when
    its region row is missing.
    """
    return (
        select(
            TrainerPokemon.trainer_id,
            TrainerPokemon.pokemon_id.label("link_pokemon_id"),
            Pokemon.pokemon_id,
            Pokemon.name,
            Pokemon.region_id,
            Region.region_name,
        )
        .select_from(TrainerPokemon)
        .outerjoin(Pokemon, Pokemon.pokemon_id == TrainerPokemon.pokemon_id)
        .outerjoin(Region, Region.region_id == Pokemon.region_id)
        .where(TrainerPokemon.trainer_id.in_(list(trainer_ids)))
        .order_by(TrainerPokemon.trainer_id, TrainerPokemon.id)
    )


def select_region_names(region_ids: Sequence[int]) -> Select:
    """(region_id, region_name) for the given regions."""
    return select(Region.region_id, Region.region_name).where(
        Region.region_id.in_(list(region_ids))
    )


def select_pokemon_abilities(pokemon_ids: Sequence[int]) -> Select:
    """
    One row per ability link of the given pokemon.

    Columns: (pokemon_id, link_ability_id, ability_id, name, damage,
    status_effect). ability_id is NULL when the linked ability row is
    missing.
    """
    return (
        select(
            PokemonAbility.pokemon_id,
            PokemonAbility.ability_id.label("link_ability_id"),
            Ability.ability_id,
            Ability.name,
            Ability.damage,
            Ability.status_effect,
        )
        .select_from(PokemonAbility)
        .outerjoin(Ability, Ability.ability_id == PokemonAbility.ability_id)
        .where(PokemonAbility.pokemon_id.in_(list(pokemon_ids)))
        .order_by(PokemonAbility.pokemon_id, PokemonAbility.id)
    )
