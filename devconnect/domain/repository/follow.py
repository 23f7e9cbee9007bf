"""Follow edge repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from devconnect.domain.model import AccountSummary, FollowEdge
from devconnect.domain.value import AccountId


class FollowRepository(ABC):
    """Repository for the directed follow graph.

    Edges are unique per ordered (follower, followee) pair. Counts are
    always computed from the stored edges.
    """

    @abstractmethod
    async def find(
        self, follower_id: AccountId, followee_id: AccountId
    ) -> Optional[FollowEdge]:
        """Find the edge between two accounts.

        Args:
            follower_id: The following account
            followee_id: The followed account

        Returns:
            The edge if present, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, edge: FollowEdge) -> FollowEdge:
        """Insert a follow edge.

        Args:
            edge: The edge to insert

        Returns:
            The saved edge

        Raises:
            ConflictError: If the ordered pair already has an edge
        """
        pass

    @abstractmethod
    async def delete(self, follower_id: AccountId, followee_id: AccountId) -> bool:
        """Delete the edge between two accounts.

        Returns:
            True if an edge was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_followers(self, account_id: AccountId) -> int:
        """Count edges pointing at the account."""
        pass

    @abstractmethod
    async def count_following(self, account_id: AccountId) -> int:
        """Count edges leaving the account."""
        pass

    @abstractmethod
    async def list_followers(
        self, account_id: AccountId, limit: int, offset: int = 0
    ) -> list[AccountSummary]:
        """List accounts following the given account.

        Ordered by edge creation time, then follower id.

        Args:
            account_id: The followed account
            limit: Maximum number of rows
            offset: Number of rows to skip

        Returns:
            One page of follower summaries
        """
        pass

    @abstractmethod
    async def list_following(
        self, account_id: AccountId, limit: int, offset: int = 0
    ) -> list[AccountSummary]:
        """List accounts the given account follows.

        Ordered by edge creation time, then followee id.
        """
        pass

    @abstractmethod
    async def find_followee_ids(self, follower_id: AccountId) -> list[AccountId]:
        """Ids of every account the follower currently follows."""
        pass
