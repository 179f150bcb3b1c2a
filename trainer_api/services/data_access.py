"""
Trainer API — Data Access Layer
=================================

What:  The only code that talks to the database session.
How:   Wraps a request-scoped AsyncSession with three primitives:
         query(statement)   -> all result rows
         execute(statement) -> affected-row count
         commit()           -> commits the request transaction
       and translates every SQLAlchemy failure into QueryError, logged with
       the statement text.
Who:   Used by the assemblers and the trainer/pokemon services.

Statements come from services/statements.py and always carry their values as
bound parameters.
"""

import logging
from typing import Any, Optional, Sequence

from sqlalchemy import Executable, Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trainer_api.exceptions import QueryError, RelatedRowMissingError

logger = logging.getLogger(__name__)


class DataAccess:
    """Query/execute facade over one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def query(self, statement: Executable) -> Sequence[Row[Any]]:
        """
        Run a SELECT and return every row.

        Raises:
            QueryError: the store rejected or failed the statement
        """
        try:
            result = await self.session.execute(statement)
            return result.all()
        except SQLAlchemyError as e:
            logger.error("Query failed: %s | statement: %s", e, statement)
            raise QueryError(
                message="Query failed",
                statement=str(statement),
                context={"error_type": type(e).__name__},
            ) from e

    async def execute(self, statement: Executable) -> int:
        """
        Run an INSERT/UPDATE/DELETE and return the affected-row count.

        Raises:
            QueryError: the store rejected or failed the statement
        """
        try:
            result = await self.session.execute(statement)
            return result.rowcount
        except SQLAlchemyError as e:
            logger.error("Statement failed: %s | statement: %s", e, statement)
            raise QueryError(
                message="Statement failed",
                statement=str(statement),
                context={"error_type": type(e).__name__},
            ) from e

    async def commit(self) -> None:
        """
        Commit the request transaction.

        Writes are committed here, before the handler builds its response.

        Raises:
            QueryError: the store rejected the commit
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error("Commit failed: %s", e)
            raise QueryError(
                message="Commit failed",
                context={"error_type": type(e).__name__},
            ) from e

    async def first(
        self,
        statement: Executable,
        resource: str,
        resource_id: Optional[Any] = None,
    ) -> Row[Any]:
        """
        Run a SELECT that must produce at least one row and return the first.

        Raises:
            RelatedRowMissingError: the statement produced no rows
            QueryError: the store rejected or failed the statement
        """
        rows = await self.query(statement)
        if not rows:
            raise RelatedRowMissingError(resource=resource, resource_id=resource_id)
        return rows[0]
