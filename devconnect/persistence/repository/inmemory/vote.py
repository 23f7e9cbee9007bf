"""In-memory vote repository for testing."""

from typing import Optional

from devconnect.domain.model import Vote
from devconnect.domain.repository import VoteRepository
from devconnect.domain.value import AccountId, ContentId

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def find(self, actor_id: AccountId, target_id: ContentId) -> Optional[Vote]:
        """Find an actor's vote on a target."""
        for vote in self.db.votes.values():
            if vote.actor_id == actor_id and vote.target_id == target_id:
                return vote
        return None

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the direction of the existing one."""
        existing = await self.find(vote.actor_id, vote.target_id)
        if existing:
            vote = existing.model_copy(
                update={"direction": vote.direction, "updated_at": vote.updated_at}
            )
        self.db.votes[vote.id] = vote
        return vote

    async def score(self, target_id: ContentId) -> int:
        """Sum of vote directions on a target."""
        return sum(
            v.direction.value for v in self.db.votes.values() if v.target_id == target_id
        )
