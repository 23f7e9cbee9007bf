"""In-memory follow repository for testing."""

from typing import Optional

from devconnect.domain.error import ConflictError
from devconnect.domain.model import AccountSummary, FollowEdge
from devconnect.domain.repository import FollowRepository
from devconnect.domain.value import AccountId

from .database import InMemoryDatabase


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def find(
        self, follower_id: AccountId, followee_id: AccountId
    ) -> Optional[FollowEdge]:
        """Find the edge between two accounts."""
        for edge in self.db.follow_edges.values():
            if edge.follower_id == follower_id and edge.followee_id == followee_id:
                return edge
        return None

    async def save(self, edge: FollowEdge) -> FollowEdge:
        """Insert a follow edge.

        Raises:
            ConflictError: If the ordered pair already has an edge
        """
        if await self.find(edge.follower_id, edge.followee_id):
            raise ConflictError("FollowEdge", f"{edge.follower_id}->{edge.followee_id}")
        self.db.follow_edges[edge.id] = edge
        return edge

    async def delete(self, follower_id: AccountId, followee_id: AccountId) -> bool:
        """Delete the edge between two accounts."""
        edge = await self.find(follower_id, followee_id)
        if not edge:
            return False
        del self.db.follow_edges[edge.id]
        return True

    async def count_followers(self, account_id: AccountId) -> int:
        """Count edges pointing at the account."""
        return sum(
            1 for e in self.db.follow_edges.values() if e.followee_id == account_id
        )

    async def count_following(self, account_id: AccountId) -> int:
        """Count edges leaving the account."""
        return sum(
            1 for e in self.db.follow_edges.values() if e.follower_id == account_id
        )

    def _summaries(
        self, pairs: list[tuple[FollowEdge, AccountId]], limit: int, offset: int
    ) -> list[AccountSummary]:
        pairs.sort(key=lambda p: (p[0].created_at, str(p[1])))
        summaries = []
        for _, other_id in pairs[offset : offset + limit]:
            account = self.db.accounts.get(other_id)
            if account:
                summaries.append(
                    AccountSummary(
                        id=account.id,
                        handle=account.handle,
                        display_name=account.display_name,
                        rank=account.rank,
                    )
                )
        return summaries

    async def list_followers(
        self, account_id: AccountId, limit: int, offset: int = 0
    ) -> list[AccountSummary]:
        """List accounts following the given account."""
        pairs = [
            (e, e.follower_id)
            for e in self.db.follow_edges.values()
            if e.followee_id == account_id
        ]
        return self._summaries(pairs, limit, offset)

    async def list_following(
        self, account_id: AccountId, limit: int, offset: int = 0
    ) -> list[AccountSummary]:
        """List accounts the given account follows."""
        pairs = [
            (e, e.followee_id)
            for e in self.db.follow_edges.values()
            if e.follower_id == account_id
        ]
        return self._summaries(pairs, limit, offset)

    async def find_followee_ids(self, follower_id: AccountId) -> list[AccountId]:
        """Ids of every account the follower follows."""
        return [
            e.followee_id
            for e in self.db.follow_edges.values()
            if e.follower_id == follower_id
        ]
