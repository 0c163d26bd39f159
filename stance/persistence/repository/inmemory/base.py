"""Shared storage for the in-memory repositories."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, Sequence, TypeVar
from uuid import UUID

from stance.domain.repository import TransactionManager

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """Rows keyed by ID, kept in insertion order.

    Domain models are immutable, so a shallow copy of the dict is a full
    snapshot of the table.
    """

    def __init__(self) -> None:
        self._rows: dict[UUID, T] = {}

    def _newest_first(self, rows: Sequence[T]) -> list[T]:
        # Later inserts win ties on created_at
        return sorted(reversed(list(rows)), key=lambda r: r.created_at, reverse=True)  # type: ignore[attr-defined]

    def snapshot(self) -> dict[UUID, T]:
        return dict(self._rows)

    def restore(self, state: dict[UUID, T]) -> None:
        self._rows = dict(state)


class InMemoryTransactionManager(TransactionManager):
    """Atomic blocks over in-memory tables: snapshot on entry, restore on error."""

    def __init__(self, tables: Sequence[InMemoryTable]) -> None:
        self.tables = list(tables)

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshots = [table.snapshot() for table in self.tables]
        try:
            yield
        except BaseException:
            for table, state in zip(self.tables, snapshots):
                table.restore(state)
            raise
