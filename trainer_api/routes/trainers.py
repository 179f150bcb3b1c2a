"""
Trainer API — Trainer Route Handlers
======================================

What:  GET/POST /trainer and GET/DELETE /trainer/{trainer_id}.
How:   Each handler receives a request-scoped session via Depends(), calls
       TrainerService, and answers through the response envelope.

    GET    /trainer        → 200 {"trainers": [...]} rosters resolved
    GET    /trainer/{id}   → 200 {"trainers": [...]} zero or one, pokemon null
    POST   /trainer        → 200 empty
    DELETE /trainer/{id}   → 200 empty (also when nothing was deleted)

Failures are raised as exceptions and mapped by the global handlers.
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from trainer_api import envelope
from trainer_api.database import get_db_session
from trainer_api.routes import INT32_MAX, INT32_MIN
from trainer_api.schemas.trainer import TrainerCreate, TrainerListResponse
from trainer_api.services.trainer_service import trainer_service

router = APIRouter(tags=["Trainers"])


@router.get(
    "/trainer",
    response_model=TrainerListResponse,
    summary="List trainers with their pokemon",
)
async def get_trainers(
    db: AsyncSession = Depends(get_db_session),
) -> TrainerListResponse:
    return await trainer_service.list_trainers(db)


@router.get(
    "/trainer/{trainer_id}",
    response_model=TrainerListResponse,
    responses={404: {"description": "Trainer not found (strict mode only)"}},
    summary="Get one trainer by id",
)
async def get_trainer(
    trainer_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> TrainerListResponse:
    return await trainer_service.get_trainer(db, trainer_id)


@router.post(
    "/trainer",
    response_class=Response,
    responses={200: {"description": "Trainer created"}},
    summary="Create a trainer",
)
async def create_trainer(
    payload: TrainerCreate,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await trainer_service.create_trainer(db, payload)
    return envelope.ok()


@router.delete(
    "/trainer/{trainer_id}",
    response_class=Response,
    responses={
        200: {"description": "Trainer deleted (or did not exist)"},
        404: {"description": "Trainer not found (strict mode only)"},
    },
    summary="Delete a trainer",
)
async def delete_trainer(
    trainer_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await trainer_service.delete_trainer(db, trainer_id)
    return envelope.ok()
