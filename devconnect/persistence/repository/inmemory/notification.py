"""In-memory notification and preference repositories for testing."""

from typing import Optional, Sequence

from devconnect.domain.model import Notification, NotificationPreference
from devconnect.domain.repository import NotificationRepository, PreferenceRepository
from devconnect.domain.value import AccountId, NotificationId

from .database import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self.db.notifications.get(notification_id)

    async def find_by_ids(
        self, notification_ids: Sequence[NotificationId]
    ) -> list[Notification]:
        """Find several notifications at once."""
        return [
            self.db.notifications[i]
            for i in notification_ids
            if i in self.db.notifications
        ]

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        self.db.notifications[notification.id] = notification
        return notification

    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set the read flag of one notification."""
        notification = self.db.notifications.get(notification_id)
        if notification:
            self.db.notifications[notification_id] = notification.model_copy(
                update={"is_read": True}
            )

    async def mark_all_read(self, recipient_id: AccountId) -> int:
        """Set the read flag of every unread notification of a recipient."""
        updated = 0
        for key, notification in list(self.db.notifications.items()):
            if notification.recipient_id == recipient_id and not notification.is_read:
                self.db.notifications[key] = notification.model_copy(
                    update={"is_read": True}
                )
                updated += 1
        return updated

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete one notification."""
        return self.db.notifications.pop(notification_id, None) is not None

    async def delete_many(self, notification_ids: Sequence[NotificationId]) -> int:
        """Delete several notifications."""
        return sum(
            1
            for i in set(notification_ids)
            if self.db.notifications.pop(i, None) is not None
        )

    def _matches(self, notification: Notification, search: str) -> bool:
        needle = search.lower()
        if needle in notification.message.lower():
            return True
        actor = (
            self.db.accounts.get(notification.actor_id)
            if notification.actor_id
            else None
        )
        return bool(actor and actor.matches(needle))

    async def list_for_recipient(
        self,
        recipient_id: AccountId,
        unread_only: bool = False,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        rows = [
            n
            for n in self.db.notifications.values()
            if n.recipient_id == recipient_id
            and not (unread_only and n.is_read)
            and not (search and not self._matches(n, search))
        ]
        rows.sort(key=lambda n: (n.created_at, str(n.id)), reverse=True)
        return rows[offset : offset + limit]

    async def count_unread(self, recipient_id: AccountId) -> int:
        """Count unread notifications of a recipient."""
        return sum(
            1
            for n in self.db.notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )


class InMemoryPreferenceRepository(PreferenceRepository):
    """In-memory implementation of PreferenceRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def find(self, account_id: AccountId) -> Optional[NotificationPreference]:
        """Find the stored preferences of an account."""
        return self.db.preferences.get(account_id)

    async def save(self, preference: NotificationPreference) -> NotificationPreference:
        """Insert or replace an account's preferences."""
        self.db.preferences[preference.account_id] = preference
        return preference
