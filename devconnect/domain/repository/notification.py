"""Notification and preference repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from devconnect.domain.model import Notification, NotificationPreference
from devconnect.domain.value import AccountId, NotificationId


class NotificationRepository(ABC):
    """Repository for inbox notifications."""

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, notification_ids: Sequence[NotificationId]
    ) -> list[Notification]:
        """Find several notifications at once. Missing ids are skipped."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: The notification to insert

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set the read flag of one notification."""
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: AccountId) -> int:
        """Set the read flag of every unread notification of a recipient.

        Args:
            recipient_id: The inbox owner

        Returns:
            Number of notifications flipped
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete one notification.

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def delete_many(self, notification_ids: Sequence[NotificationId]) -> int:
        """Delete several notifications.

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    async def list_for_recipient(
        self,
        recipient_id: AccountId,
        unread_only: bool = False,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: The inbox owner
            unread_only: Only return unread notifications
            search: Case-insensitive substring matched against the message
                and the actor's handle and display name
            limit: Maximum number of rows
            offset: Number of rows to skip

        Returns:
            One page of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: AccountId) -> int:
        """Count unread notifications of a recipient."""
        pass


class PreferenceRepository(ABC):
    """Repository for per-account delivery preferences."""

    @abstractmethod
    async def find(self, account_id: AccountId) -> Optional[NotificationPreference]:
        """Find the stored preferences of an account, if any."""
        pass

    @abstractmethod
    async def save(self, preference: NotificationPreference) -> NotificationPreference:
        """Insert or replace an account's preferences."""
        pass
