"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.repository import TransactionManager
from loop.persistence.database import ROLLBACK_ONLY


class PostgresTransactionManager(TransactionManager):
    """Savepoints on the request's session (SAVEPOINT / ROLLBACK TO)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield

    def mark_rollback_only(self) -> None:
        # Read by session_scope when the request scope closes
        self.session.info[ROLLBACK_ONLY] = True
