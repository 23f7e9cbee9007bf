"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Transactions and savepoints on the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request-scoped session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[None]:
        if self.session.in_transaction():
            # Close the implicit transaction opened by earlier reads
            await self.session.commit()
        async with self.session.begin():
            yield

    @asynccontextmanager
    async def _savepoint(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
