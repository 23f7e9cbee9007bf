"""PostgreSQL implementation of Follow repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.error import ConflictError
from devconnect.domain.model import AccountSummary, FollowEdge
from devconnect.domain.repository import FollowRepository
from devconnect.domain.value import AccountId
from devconnect.persistence.mappers import (
    follow_edge_to_dict,
    row_to_account_summary,
    row_to_follow_edge,
)
from devconnect.persistence.tables import accounts_table, follow_edges_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, follower_id: AccountId, followee_id: AccountId
    ) -> Optional[FollowEdge]:
        """Find the edge between two accounts."""
        stmt = select(follow_edges_table).where(
            and_(
                follow_edges_table.c.follower_id == follower_id,
                follow_edges_table.c.followee_id == followee_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow_edge(row._asdict()) if row else None

    async def save(self, edge: FollowEdge) -> FollowEdge:
        """Insert a follow edge."""
        stmt = insert(follow_edges_table).values(**follow_edge_to_dict(edge))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError(
                "FollowEdge", f"{edge.follower_id}->{edge.followee_id}"
            ) from e
        return edge

    async def delete(self, follower_id: AccountId, followee_id: AccountId) -> bool:
        """Delete the edge between two accounts."""
        stmt = delete(follow_edges_table).where(
            and_(
                follow_edges_table.c.follower_id == follower_id,
                follow_edges_table.c.followee_id == followee_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_followers(self, account_id: AccountId) -> int:
        """Count edges pointing at the account."""
        stmt = (
            select(func.count())
            .select_from(follow_edges_table)
            .where(follow_edges_table.c.followee_id == account_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_following(self, account_id: AccountId) -> int:
        """Count edges leaving the account."""
        stmt = (
            select(func.count())
            .select_from(follow_edges_table)
            .where(follow_edges_table.c.follower_id == account_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _list(
        self, match_column, join_column, account_id: AccountId, limit: int, offset: int
    ) -> list[AccountSummary]:
        stmt = (
            select(
                accounts_table.c.id,
                accounts_table.c.handle,
                accounts_table.c.display_name,
                accounts_table.c.rank,
            )
            .select_from(
                follow_edges_table.join(
                    accounts_table, accounts_table.c.id == join_column
                )
            )
            .where(match_column == account_id)
            .order_by(follow_edges_table.c.created_at, join_column)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_account_summary(row._asdict()) for row in result.fetchall()]

    async def list_followers(
        self, account_id: AccountId, limit: int, offset: int = 0
    ) -> list[AccountSummary]:
        """List accounts following the given account."""
        return await self._list(
            follow_edges_table.c.followee_id,
            follow_edges_table.c.follower_id,
            account_id,
            limit,
            offset,
        )

    async def list_following(
        self, account_id: AccountId, limit: int, offset: int = 0
    ) -> list[AccountSummary]:
        """List accounts the given account follows."""
        return await self._list(
            follow_edges_table.c.follower_id,
            follow_edges_table.c.followee_id,
            account_id,
            limit,
            offset,
        )

    async def find_followee_ids(self, follower_id: AccountId) -> list[AccountId]:
        """Ids of every account the follower follows."""
        stmt = select(follow_edges_table.c.followee_id).where(
            follow_edges_table.c.follower_id == follower_id
        )
        result = await self.session.execute(stmt)
        return [AccountId(row.followee_id) for row in result.fetchall()]
