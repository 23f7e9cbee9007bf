"""PostgreSQL implementation of Mark repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.error import ConflictError
from devconnect.domain.model import EngagementMark
from devconnect.domain.repository import MarkRepository
from devconnect.domain.value import AccountId, ContentId, MarkKind, TargetKind
from devconnect.persistence.mappers import mark_to_dict, row_to_mark
from devconnect.persistence.tables import engagement_marks_table


class PostgresMarkRepository(MarkRepository):
    """PostgreSQL implementation of MarkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _key(
        actor_id: AccountId,
        target_kind: TargetKind,
        target_id: ContentId,
        mark_kind: MarkKind,
    ):
        return and_(
            engagement_marks_table.c.actor_id == actor_id,
            engagement_marks_table.c.target_kind == target_kind.value,
            engagement_marks_table.c.target_id == target_id,
            engagement_marks_table.c.mark_kind == mark_kind.value,
        )

    async def find(
        self,
        actor_id: AccountId,
        target_kind: TargetKind,
        target_id: ContentId,
        mark_kind: MarkKind,
    ) -> Optional[EngagementMark]:
        """Find an actor's mark on a target."""
        stmt = select(engagement_marks_table).where(
            self._key(actor_id, target_kind, target_id, mark_kind)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_mark(row._asdict()) if row else None

    async def save(self, mark: EngagementMark) -> EngagementMark:
        """Insert a mark."""
        stmt = insert(engagement_marks_table).values(**mark_to_dict(mark))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError(
                "EngagementMark", f"{mark.actor_id}:{mark.target_id}:{mark.mark_kind.value}"
            ) from e
        return mark

    async def delete_by_key(
        self,
        actor_id: AccountId,
        target_kind: TargetKind,
        target_id: ContentId,
        mark_kind: MarkKind,
    ) -> bool:
        """Delete an actor's mark on a target."""
        stmt = delete(engagement_marks_table).where(
            self._key(actor_id, target_kind, target_id, mark_kind)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count(
        self, target_kind: TargetKind, target_id: ContentId, mark_kind: MarkKind
    ) -> int:
        """Count marks of one kind on a target."""
        stmt = (
            select(func.count())
            .select_from(engagement_marks_table)
            .where(
                and_(
                    engagement_marks_table.c.target_kind == target_kind.value,
                    engagement_marks_table.c.target_id == target_id,
                    engagement_marks_table.c.mark_kind == mark_kind.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
