"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from devconnect.domain.model import Vote
from devconnect.domain.value import AccountId, ContentId


class VoteRepository(ABC):
    """Repository for up/down votes on questions and answers."""

    @abstractmethod
    async def find(self, actor_id: AccountId, target_id: ContentId) -> Optional[Vote]:
        """Find an actor's vote on a target.

        Args:
            actor_id: The voting account
            target_id: The question or answer

        Returns:
            The vote if present, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the direction of the existing one.

        The row is keyed by (actor_id, target_id); the stored id and
        created_at of an existing row are kept.

        Args:
            vote: The vote to store

        Returns:
            The vote as stored
        """
        pass

    @abstractmethod
    async def score(self, target_id: ContentId) -> int:
        """Sum of vote directions on a target."""
        pass
