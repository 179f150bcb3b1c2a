"""
Trainer API — Pokemon Route Handlers
======================================

    GET /pokemon                 → 200 {"pokemons": [...]} region + abilities resolved
    GET /pokemon-abilities/{id}  → 200 {"ability": [...]}
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from trainer_api.database import get_db_session
from trainer_api.routes import INT32_MAX, INT32_MIN
from trainer_api.schemas.pokemon import AbilityListResponse, PokemonListResponse
from trainer_api.services.pokemon_service import pokemon_service

router = APIRouter(tags=["Pokemon"])


@router.get(
    "/pokemon",
    response_model=PokemonListResponse,
    summary="List pokemon with region and abilities",
)
async def get_pokemon(
    db: AsyncSession = Depends(get_db_session),
) -> PokemonListResponse:
    return await pokemon_service.list_pokemon(db)


@router.get(
    "/pokemon-abilities/{pokemon_id}",
    response_model=AbilityListResponse,
    responses={404: {"description": "Pokemon not found (strict mode only)"}},
    summary="List the abilities of one pokemon",
)
async def get_pokemon_abilities(
    pokemon_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> AbilityListResponse:
    return await pokemon_service.list_abilities(db, pokemon_id)
