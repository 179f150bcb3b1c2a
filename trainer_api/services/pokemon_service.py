"""
Trainer API — Pokemon Service
===============================

What:  Business logic behind /pokemon and /pokemon-abilities/{id}.
How:   Fetches pokemon rows through DataAccess and delegates creature detail
       assembly (region name + abilities) to the configured Assembler.
Who:   Called by routes/pokemon.py.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from trainer_api.config import settings
from trainer_api.exceptions import NotFoundError
from trainer_api.schemas.pokemon import AbilityListResponse, PokemonListResponse
from trainer_api.services import get_assembler, statements
from trainer_api.services.data_access import DataAccess

logger = logging.getLogger(__name__)


class PokemonService:
    """Business logic layer for pokemon and ability reads."""

    async def list_pokemon(self, db: AsyncSession) -> PokemonListResponse:
        """
        Every pokemon with region name and abilities resolved.

        Raises:
            RelatedRowMissingError: a region or linked ability row is absent
            QueryError: any statement failed
        """
        data = DataAccess(db)
        rows = await data.query(statements.select_all_pokemon())
        pokemons = await get_assembler(data).assemble_pokemon(rows)
        logger.debug("Listed %d pokemon", len(pokemons))
        return PokemonListResponse(pokemons=pokemons)

    async def list_abilities(self, db: AsyncSession, pokemon_id: int) -> AbilityListResponse:
        """
        Abilities linked to one pokemon.

        A pokemon with no links yields {"ability": []}. The pokemon id itself
        is only checked in strict mode, where an unknown id raises
        NotFoundError.
        """
        data = DataAccess(db)

        if settings.strict_not_found:
            if not await data.query(statements.select_pokemon(pokemon_id)):
                raise NotFoundError(resource="pokemon", resource_id=pokemon_id)

        abilities = await get_assembler(data).list_abilities(pokemon_id)
        return AbilityListResponse(ability=abilities)


# ── Singleton Instance ────────────────────────────────────────────────────
pokemon_service = PokemonService()
