"""
Trainer API — Abstract Domain Assembly Interface
==================================================

What:  Contract for turning flat trainer / pokemon rows into nested records.
How:   Concrete strategies inherit from Assembler:
         - FanOutAssembler: one round trip per parent row and per child row
         - JoinAssembler:   one outer-join query per assembly step
       settings.assembly_strategy picks one per request via get_assembler().
Who:   Called by TrainerService and PokemonService.

Both strategies produce identical output for the same data:
    - same nested shape and field order
    - children in link order (ownership / ability link rows by surrogate id)
    - no de-duplication of repeated links
    - a missing related row raises RelatedRowMissingError and the whole
      response is discarded
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from sqlalchemy import Row

from trainer_api.schemas.pokemon import Ability, Pokemon
from trainer_api.schemas.trainer import Trainer
from trainer_api.services.data_access import DataAccess


class Assembler(ABC):
    """
    Abstract interface for nested record assembly.

    Input rows follow the column order of the statements that produce them:
        trainer rows: (trainer_id, name, gym_leader)
        pokemon rows: (pokemon_id, name, region_id)
    """

    def __init__(self, data: DataAccess):
        self.data = data

    @abstractmethod
    async def assemble_rosters(self, trainer_rows: Sequence[Row[Any]]) -> List[Trainer]:
        """
        Trainer roster assembly.

        Returns one Trainer per input row, in input order, each with `pokemon`
        set to its owned creatures (region resolved, abilities left null).

        Raises:
            RelatedRowMissingError: an owned pokemon or its region is missing
            QueryError: any statement failed
        """
        ...

    @abstractmethod
    async def assemble_pokemon(self, pokemon_rows: Sequence[Row[Any]]) -> List[Pokemon]:
        """
        Creature detail assembly.

        Returns one Pokemon per input row, in input order, with the region
        resolved to its display name and `abilities` fully populated.

        Raises:
            RelatedRowMissingError: a region or linked ability is missing
            QueryError: any statement failed
        """
        ...

    @abstractmethod
    async def list_abilities(self, pokemon_id: int) -> List[Ability]:
        """
        Abilities linked to one pokemon, in link order.

        A pokemon with no links (or an unknown pokemon id) yields [].
        """
        ...


def trainer_from_row(row: Row[Any], pokemon: Any = None) -> Trainer:
    trainer_id, name, gym_leader = row[0], row[1], row[2]
    return Trainer(
        trainer_id=trainer_id,
        name=name,
        gym_leader=bool(gym_leader),
        pokemon=pokemon,
    )


def ability_from_row(row: Row[Any]) -> Ability:
    """Row shape: (ability_id, name, damage, status_effect)."""
    return Ability(
        ability_id=row[0],
        name=row[1],
        damage=row[2],
        status_effect=row[3],
    )
