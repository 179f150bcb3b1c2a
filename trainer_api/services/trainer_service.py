"""
Trainer API — Trainer Service
===============================

What:  Business logic behind the /trainer routes.
How:   Runs trainer statements through DataAccess and, for the list endpoint,
       hands the rows to the configured Assembler for roster resolution.
Who:   Called by routes/trainers.py.

Operations:
    list_trainers()    → every trainer, roster resolved
    get_trainer(id)    → zero or one trainer, roster null
    create_trainer()   → INSERT, store assigns the id
    delete_trainer(id) → DELETE, zero affected rows is still a success unless
                         strict_not_found is enabled

Design Decision:
    TrainerService is stateless; every call receives the request's session.
    Writes commit inside the service call; get_db_session's own commit is
    then a no-op.
    Nothing is validated against the store before acting.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from trainer_api.config import settings
from trainer_api.exceptions import NotFoundError
from trainer_api.schemas.trainer import TrainerCreate, TrainerListResponse
from trainer_api.services import get_assembler, statements
from trainer_api.services.assembly_base import trainer_from_row
from trainer_api.services.data_access import DataAccess

logger = logging.getLogger(__name__)


class TrainerService:
    """
    Business logic layer for trainer operations.

    Error Handling Strategy:
        QueryError and RelatedRowMissingError propagate unchanged to the
        global handlers (→ 500). NotFoundError is raised only in strict mode.
    """

    async def list_trainers(self, db: AsyncSession) -> TrainerListResponse:
        """
        List every trainer with its owned pokemon resolved.

        Query plan:
            SELECT trainer_id, name, gym_leader FROM trainer ORDER BY trainer_id
            followed by roster assembly (see services/assembly_base.py)
        """
        data = DataAccess(db)
        rows = await data.query(statements.select_trainers())
        trainers = await get_assembler(data).assemble_rosters(rows)
        logger.debug("Listed %d trainers", len(trainers))
        return TrainerListResponse(trainers=trainers)

    async def get_trainer(self, db: AsyncSession, trainer_id: int) -> TrainerListResponse:
        """
        Trainers whose id matches, roster left null.

        Returns a list of zero or one element. In strict mode an empty
        result raises NotFoundError instead.
        """
        data = DataAccess(db)
        rows = await data.query(statements.select_trainer(trainer_id))

        if not rows and settings.strict_not_found:
            raise NotFoundError(resource="trainer", resource_id=trainer_id)

        return TrainerListResponse(trainers=[trainer_from_row(row) for row in rows])

    async def create_trainer(self, db: AsyncSession, payload: TrainerCreate) -> int:
        """Insert and commit a trainer; returns the affected-row count."""
        data = DataAccess(db)
        affected = await data.execute(
            statements.insert_trainer(name=payload.name, gym_leader=payload.gym_leader)
        )
        await data.commit()
        logger.info("Created trainer name=%s gym_leader=%s", payload.name, payload.gym_leader)
        return affected

    async def delete_trainer(self, db: AsyncSession, trainer_id: int) -> int:
        """
        Delete a trainer by id; returns the affected-row count.

        Ownership links are removed by the foreign key's ON DELETE CASCADE.
        Commits before returning; a failed commit raises QueryError.
        """
        data = DataAccess(db)
        affected = await data.execute(statements.delete_trainer(trainer_id))

        if affected == 0 and settings.strict_not_found:
            raise NotFoundError(resource="trainer", resource_id=trainer_id)

        await data.commit()
        logger.info("Deleted trainer %s (%d rows)", trainer_id, affected)
        return affected


# ── Singleton Instance ────────────────────────────────────────────────────
trainer_service = TrainerService()
