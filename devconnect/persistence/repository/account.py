"""PostgreSQL implementation of Account repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.error import ConflictError
from devconnect.domain.model import Account
from devconnect.domain.repository import AccountRepository
from devconnect.domain.value import AccountId, Rank
from devconnect.persistence.mappers import account_to_dict, row_to_account
from devconnect.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_account(row._asdict()) if row else None

    async def find_by_handle(self, handle: str) -> Optional[Account]:
        """Find an account by handle (case-insensitive)."""
        stmt = select(accounts_table).where(
            func.lower(accounts_table.c.handle) == handle.lower()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_account(row._asdict()) if row else None

    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        """Find several accounts at once."""
        if not account_ids:
            return []
        stmt = select(accounts_table).where(accounts_table.c.id.in_(account_ids))
        result = await self.session.execute(stmt)
        return [row_to_account(row._asdict()) for row in result.fetchall()]

    async def save(self, account: Account) -> Account:
        """Create an account."""
        stmt = insert(accounts_table).values(**account_to_dict(account))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError("Account", account.handle.root) from e
        return account

    async def update(self, account: Account) -> Account:
        """Persist profile fields of an existing account."""
        stmt = (
            update(accounts_table)
            .where(accounts_table.c.id == account.id)
            .values(
                display_name=account.display_name,
                email=account.email,
                is_private=account.is_private,
                updated_at=account.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return account

    async def update_rank(self, account_id: AccountId, rank: Rank) -> None:
        """Overwrite the stored rank tier."""
        stmt = (
            update(accounts_table)
            .where(accounts_table.c.id == account_id)
            .values(rank=rank.value, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, account_id: AccountId) -> bool:
        """Delete an account; foreign keys cascade to dependent rows."""
        stmt = delete(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
