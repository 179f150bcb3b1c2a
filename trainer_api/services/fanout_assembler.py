"""
Trainer API — Fan-Out Assembler
=================================

What:  Assembles nested records with one round trip per resolution step.
How:   Every lookup is awaited serially on the request's session:

    Trainer roster (per trainer):
        trainerspokemon → pokemon ids
        for each id:  pokemon row → region name

    Creature detail (per pokemon):
        region name
        pokemonabilities → ability ids
        for each id:  ability row

Query count for the roster is 1 + 2·P per trainer (P = owned pokemon), so
this strategy is kept for behavioral parity with per-row failure, not speed.
The first missing row aborts the whole assembly.
"""

import logging
from typing import Any, List, Sequence

from sqlalchemy import Row

from trainer_api.schemas.pokemon import Ability, Pokemon
from trainer_api.schemas.trainer import Trainer
from trainer_api.services import statements
from trainer_api.services.assembly_base import (
    Assembler,
    ability_from_row,
    trainer_from_row,
)

logger = logging.getLogger(__name__)


class FanOutAssembler(Assembler):
    """Assembler issuing one statement per parent row and per child row."""

    async def assemble_rosters(self, trainer_rows: Sequence[Row[Any]]) -> List[Trainer]:
        trainers = []
        for row in trainer_rows:
            trainer_id = row[0]
            owned = await self.data.query(statements.select_owned_pokemon_ids(trainer_id))

            roster = []
            for (pokemon_id,) in owned:
                pokemon_row = await self.data.first(
                    statements.select_pokemon(pokemon_id),
                    resource="pokemon",
                    resource_id=pokemon_id,
                )
                region = await self._region_name(pokemon_row[2])
                roster.append(
                    Pokemon(
                        pokemon_id=pokemon_row[0],
                        name=pokemon_row[1],
                        region=region,
                    )
                )

            trainers.append(trainer_from_row(row, pokemon=roster))

        logger.debug("Fan-out roster assembly resolved %d trainers", len(trainers))
        return trainers

    async def assemble_pokemon(self, pokemon_rows: Sequence[Row[Any]]) -> List[Pokemon]:
        result = []
        for pokemon_id, name, region_id in pokemon_rows:
            region = await self._region_name(region_id)
            abilities = await self.list_abilities(pokemon_id)
            result.append(
                Pokemon(
                    pokemon_id=pokemon_id,
                    name=name,
                    region=region,
                    abilities=abilities,
                )
            )
        return result

    async def list_abilities(self, pokemon_id: int) -> List[Ability]:
        links = await self.data.query(statements.select_ability_ids(pokemon_id))
        abilities = []
        for (ability_id,) in links:
            ability_row = await self.data.first(
                statements.select_ability(ability_id),
                resource="ability",
                resource_id=ability_id,
            )
            abilities.append(ability_from_row(ability_row))
        return abilities

    async def _region_name(self, region_id: int) -> str:
        row = await self.data.first(
            statements.select_region_name(region_id),
            resource="region",
            resource_id=region_id,
        )
        return row[0]
