"""PostgreSQL implementations of Notification and Preference repositories."""

from typing import Optional, Sequence

from sqlalchemy import and_, delete, func, insert, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.model import Notification, NotificationPreference
from devconnect.domain.repository import NotificationRepository, PreferenceRepository
from devconnect.domain.value import AccountId, NotificationId
from devconnect.persistence.mappers import (
    notification_to_dict,
    preference_to_dict,
    row_to_notification,
    row_to_preference,
)
from devconnect.persistence.tables import (
    accounts_table,
    notification_preferences_table,
    notifications_table,
)


def _like_pattern(search: str) -> str:
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_ids(
        self, notification_ids: Sequence[NotificationId]
    ) -> list[Notification]:
        """Find several notifications at once."""
        if not notification_ids:
            return []
        stmt = select(notifications_table).where(
            notifications_table.c.id.in_(notification_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = insert(notifications_table).values(
            **notification_to_dict(notification)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set the read flag of one notification."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(is_read=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def mark_all_read(self, recipient_id: AccountId) -> int:
        """Set the read flag of every unread notification of a recipient."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete one notification."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_many(self, notification_ids: Sequence[NotificationId]) -> int:
        """Delete several notifications."""
        if not notification_ids:
            return 0
        stmt = delete(notifications_table).where(
            notifications_table.c.id.in_(notification_ids)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def list_for_recipient(
        self,
        recipient_id: AccountId,
        unread_only: bool = False,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        conditions = [notifications_table.c.recipient_id == recipient_id]
        if unread_only:
            conditions.append(notifications_table.c.is_read.is_(False))
        if search:
            pattern = _like_pattern(search)
            conditions.append(
                or_(
                    notifications_table.c.message.ilike(pattern, escape="\\"),
                    accounts_table.c.handle.ilike(pattern, escape="\\"),
                    accounts_table.c.display_name.ilike(pattern, escape="\\"),
                )
            )

        stmt = (
            select(notifications_table)
            .select_from(
                notifications_table.outerjoin(
                    accounts_table,
                    accounts_table.c.id == notifications_table.c.actor_id,
                )
            )
            .where(and_(*conditions))
            .order_by(
                notifications_table.c.created_at.desc(),
                notifications_table.c.id.desc(),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, recipient_id: AccountId) -> int:
        """Count unread notifications of a recipient."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()


class PostgresPreferenceRepository(PreferenceRepository):
    """PostgreSQL implementation of PreferenceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, account_id: AccountId) -> Optional[NotificationPreference]:
        """Find the stored preferences of an account."""
        stmt = select(notification_preferences_table).where(
            notification_preferences_table.c.account_id == account_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_preference(row._asdict()) if row else None

    async def save(self, preference: NotificationPreference) -> NotificationPreference:
        """Insert or replace an account's preferences."""
        values = preference_to_dict(preference)
        stmt = pg_insert(notification_preferences_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[notification_preferences_table.c.account_id],
            set_={k: v for k, v in values.items() if k != "account_id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return preference
