"""Helpers shared by the PostgreSQL repositories."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import logfire
from sqlalchemy import Insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stance.domain.error import ConflictError
from stance.domain.repository import TransactionManager


async def insert_unique(
    session: AsyncSession,
    stmt: Insert,
    constraint: str,
    resource: str,
    identifier: str,
) -> Any:
    """Run an INSERT guarded by a unique constraint.

    The statement runs inside a SAVEPOINT so that losing the race to a
    concurrent duplicate only rolls back this insert, not the request.

    Raises:
        ConflictError: If ``constraint`` rejected the row
    """
    try:
        async with session.begin_nested():
            return await session.execute(stmt)
    except IntegrityError as e:
        if constraint not in str(e.orig):
            raise
        logfire.warn(
            "Unique constraint violation",
            constraint=constraint,
            resource=resource,
            identifier=identifier,
        )
        raise ConflictError(resource, identifier) from e


class PostgresTransactionManager(TransactionManager):
    """Atomic blocks as SAVEPOINTs of the request session.

    The outer transaction is still committed or rolled back by the session
    provider at the end of the request.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
