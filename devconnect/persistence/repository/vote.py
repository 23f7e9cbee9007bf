"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.model import Vote
from devconnect.domain.repository import VoteRepository
from devconnect.domain.value import AccountId, ContentId
from devconnect.persistence.mappers import row_to_vote, vote_to_dict
from devconnect.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, actor_id: AccountId, target_id: ContentId) -> Optional[Vote]:
        """Find an actor's vote on a target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.actor_id == actor_id,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the direction of the existing one."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_vote",
            set_={
                "direction": stmt.excluded.direction,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(*votes_table.c)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def score(self, target_id: ContentId) -> int:
        """Sum of vote directions on a target."""
        stmt = select(func.coalesce(func.sum(votes_table.c.direction), 0)).where(
            votes_table.c.target_id == target_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
