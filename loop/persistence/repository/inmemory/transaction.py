"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from loop.domain.repository import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Savepoints are no-ops; in-memory writes are never rolled back.

    `rollback_only` records whether the request asked for its writes to be
    discarded.
    """

    def __init__(self) -> None:
        self.savepoints = 0
        self.rollback_only = False

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        self.savepoints += 1
        yield

    def mark_rollback_only(self) -> None:
        self.rollback_only = True
