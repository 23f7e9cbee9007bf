"""Engagement mark repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from devconnect.domain.model import EngagementMark
from devconnect.domain.value import AccountId, ContentId, MarkKind, TargetKind


class MarkRepository(ABC):
    """Repository for likes and bookmarks.

    One row per (actor, target kind, target id, mark kind).
    """

    @abstractmethod
    async def find(
        self,
        actor_id: AccountId,
        target_kind: TargetKind,
        target_id: ContentId,
        mark_kind: MarkKind,
    ) -> Optional[EngagementMark]:
        """Find an actor's mark on a target.

        Returns:
            The mark if present, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, mark: EngagementMark) -> EngagementMark:
        """Insert a mark.

        Args:
            mark: The mark to insert

        Returns:
            The saved mark

        Raises:
            ConflictError: If the actor already has this mark on the target
        """
        pass

    @abstractmethod
    async def delete_by_key(
        self,
        actor_id: AccountId,
        target_kind: TargetKind,
        target_id: ContentId,
        mark_kind: MarkKind,
    ) -> bool:
        """Delete an actor's mark on a target.

        Returns:
            True if a mark was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count(
        self, target_kind: TargetKind, target_id: ContentId, mark_kind: MarkKind
    ) -> int:
        """Count marks of one kind on a target."""
        pass
