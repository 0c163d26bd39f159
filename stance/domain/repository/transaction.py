"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Runs a group of repository calls as one all-or-nothing unit.

    Used for multi-table writes such as the content cascade delete, where a
    partial result would leave orphaned rows.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Every repository write inside the block is committed together or,
        if the block raises, rolled back together. The exception propagates.
        """
        pass
