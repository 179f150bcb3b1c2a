"""
Trainer API — Join Assembler
==============================

What:  Assembles nested records with one outer-join query per assembly step.
How:
    Trainer roster:   1 query  (trainerspokemon ⟕ pokemon ⟕ region)
    Creature detail:  2 queries (region names by id, pokemonabilities ⟕ ability)

Outer joins keep dangling links in the result as NULL columns; those are
turned into RelatedRowMissingError, so a missing pokemon, region or ability
fails the request exactly like the fan-out strategy instead of silently
dropping the child.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Sequence

from sqlalchemy import Row

from trainer_api.exceptions import RelatedRowMissingError
from trainer_api.schemas.pokemon import Ability, Pokemon
from trainer_api.schemas.trainer import Trainer
from trainer_api.services import statements
from trainer_api.services.assembly_base import Assembler, trainer_from_row

logger = logging.getLogger(__name__)


class JoinAssembler(Assembler):
    """Assembler issuing one joined statement per assembly step."""

    async def assemble_rosters(self, trainer_rows: Sequence[Row[Any]]) -> List[Trainer]:
        if not trainer_rows:
            return []

        trainer_ids = [row[0] for row in trainer_rows]
        link_rows = await self.data.query(statements.select_rosters(trainer_ids))

        rosters: Dict[int, List[Pokemon]] = defaultdict(list)
        for trainer_id, link_pokemon_id, pokemon_id, name, region_id, region_name in link_rows:
            if pokemon_id is None:
                raise RelatedRowMissingError(resource="pokemon", resource_id=link_pokemon_id)
            if region_name is None:
                raise RelatedRowMissingError(resource="region", resource_id=region_id)
            rosters[trainer_id].append(
                Pokemon(pokemon_id=pokemon_id, name=name, region=region_name)
            )

        logger.debug(
            "Join roster assembly resolved %d links for %d trainers",
            len(link_rows),
            len(trainer_ids),
        )
        return [trainer_from_row(row, pokemon=rosters.get(row[0], [])) for row in trainer_rows]

    async def assemble_pokemon(self, pokemon_rows: Sequence[Row[Any]]) -> List[Pokemon]:
        if not pokemon_rows:
            return []

        region_ids = sorted({row[2] for row in pokemon_rows})
        region_rows = await self.data.query(statements.select_region_names(region_ids))
        regions = {region_id: region_name for region_id, region_name in region_rows}

        abilities = await self._abilities_by_pokemon([row[0] for row in pokemon_rows])

        result = []
        for pokemon_id, name, region_id in pokemon_rows:
            if region_id not in regions:
                raise RelatedRowMissingError(resource="region", resource_id=region_id)
            result.append(
                Pokemon(
                    pokemon_id=pokemon_id,
                    name=name,
                    region=regions[region_id],
                    abilities=abilities.get(pokemon_id, []),
                )
            )
        return result

    async def list_abilities(self, pokemon_id: int) -> List[Ability]:
        abilities = await self._abilities_by_pokemon([pokemon_id])
        return abilities.get(pokemon_id, [])

    async def _abilities_by_pokemon(self, pokemon_ids: List[int]) -> Dict[int, List[Ability]]:
        rows = await self.data.query(statements.select_pokemon_abilities(pokemon_ids))
        grouped: Dict[int, List[Ability]] = defaultdict(list)
        for pokemon_id, link_ability_id, ability_id, name, damage, status_effect in rows:
            if ability_id is None:
                raise RelatedRowMissingError(resource="ability", resource_id=link_ability_id)
            grouped[pokemon_id].append(
                Ability(
                    ability_id=ability_id,
                    name=name,
                    damage=damage,
                    status_effect=status_effect,
                )
            )
        return grouped
