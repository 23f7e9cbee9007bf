"""In-memory mark repository for testing."""

from typing import Optional

from devconnect.domain.error import ConflictError
from devconnect.domain.model import EngagementMark
from devconnect.domain.repository import MarkRepository
from devconnect.domain.value import AccountId, ContentId, MarkKind, TargetKind

from .database import InMemoryDatabase


class InMemoryMarkRepository(MarkRepository):
    """In-memory implementation of MarkRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def find(
        self,
        actor_id: AccountId,
        target_kind: TargetKind,
        target_id: ContentId,
        mark_kind: MarkKind,
    ) -> Optional[EngagementMark]:
        """Find an actor's mark on a target."""
        for mark in self.db.marks.values():
            if (
                mark.actor_id == actor_id
                and mark.target_kind == target_kind
                and mark.target_id == target_id
                and mark.mark_kind == mark_kind
            ):
                return mark
        return None

    async def save(self, mark: EngagementMark) -> EngagementMark:
        """Insert a mark.

        Raises:
            ConflictError: If the actor already has this mark on the target
        """
        existing = await self.find(
            mark.actor_id, mark.target_kind, mark.target_id, mark.mark_kind
        )
        if existing:
            raise ConflictError("EngagementMark", f"{mark.actor_id}:{mark.target_id}")
        self.db.marks[mark.id] = mark
        return mark

    async def delete_by_key(
        self,
        actor_id: AccountId,
        target_kind: TargetKind,
        target_id: ContentId,
        mark_kind: MarkKind,
    ) -> bool:
        """Delete an actor's mark on a target."""
        mark = await self.find(actor_id, target_kind, target_id, mark_kind)
        if not mark:
            return False
        del self.db.marks[mark.id]
        return True

    async def count(
        self, target_kind: TargetKind, target_id: ContentId, mark_kind: MarkKind
    ) -> int:
        """Count marks of one kind on a target."""
        return sum(
            1
            for m in self.db.marks.values()
            if m.target_kind == target_kind
            and m.target_id == target_id
            and m.mark_kind == mark_kind
        )
