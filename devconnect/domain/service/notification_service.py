"""Notification inbox service."""

from datetime import datetime
from typing import AsyncIterator, Optional, Sequence, Union
from uuid import uuid4

import logfire

from devconnect.domain.error import ForbiddenError, NotFoundError, ValidationError
from devconnect.domain.model import Notification, NotificationDraft
from devconnect.domain.repository import NotificationRepository
from devconnect.domain.value import (
    AccountId,
    NotificationFilter,
    NotificationId,
    NotificationKind,
    NotificationOrigin,
)

from .base import Service


def _parse_filter(value: Union[NotificationFilter, str]) -> NotificationFilter:
    try:
        return NotificationFilter(value)
    except ValueError:
        raise ValidationError(f"Unknown notification filter: {value}")


class NotificationService(Service):
    """Owns inbox rows.

    Rows are inserted by the fan-out engine. Recipients may read, flag and
    delete their own rows and nobody else's.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        batch_size: int = 100,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            batch_size: Page size used by iter_notifications
        """
        self.notification_repository = notification_repository
        self.batch_size = batch_size

    @staticmethod
    def authorize_insert(
        origin: NotificationOrigin,
        caller_id: Optional[AccountId],
        draft: NotificationDraft,
    ) -> None:
        """Check that the caller may insert the drafted notification.

        The fan-out engine may insert anything. A direct caller may only
        record the follow notification for an edge it created itself.

        Raises:
            ForbiddenError: If the insertion is not allowed
        """
        if origin is NotificationOrigin.FANOUT:
            return
        if (
            caller_id is not None
            and caller_id == draft.actor_id
            and draft.kind is NotificationKind.FOLLOW
        ):
            return
        logfire.warn(
            "Rejected notification insert",
            origin=origin.value,
            caller_id=str(caller_id),
            actor_id=str(draft.actor_id),
            kind=draft.kind.value,
        )
        raise ForbiddenError("Notification", str(draft.recipient_id), str(caller_id))

    async def create(
        self,
        draft: NotificationDraft,
        origin: NotificationOrigin,
        caller_id: Optional[AccountId] = None,
    ) -> Notification:
        """Insert a notification for its recipient.

        Args:
            draft: The derived notification
            origin: Who is inserting the row
            caller_id: Authenticated caller for CLIENT inserts

        Returns:
            The stored, unread notification

        Raises:
            ForbiddenError: If the insertion guard rejects the caller
        """
        self.authorize_insert(origin, caller_id, draft)

        notification = Notification(
            id=NotificationId(uuid4()),
            recipient_id=draft.recipient_id,
            actor_id=draft.actor_id,
            kind=draft.kind,
            target_id=draft.target_id,
            target_type=draft.target_type,
            message=draft.message,
            is_read=False,
            created_at=datetime.now(),
        )
        saved = await self.notification_repository.save(notification)
        logfire.info(
            "Notification created",
            notification_id=str(saved.id),
            recipient_id=str(saved.recipient_id),
            kind=saved.kind.value,
        )
        return saved

    async def _get_owned(
        self, notification_id: NotificationId, recipient_id: AccountId
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if not notification:
            raise NotFoundError("Notification", str(notification_id))
        if notification.recipient_id != recipient_id:
            logfire.warn(
                "Notification access by non-recipient",
                notification_id=str(notification_id),
                account_id=str(recipient_id),
            )
            raise ForbiddenError("Notification", str(notification_id), str(recipient_id))
        return notification

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: AccountId
    ) -> Notification:
        """Mark one notification as read.

        Args:
            notification_id: The notification
            recipient_id: The authenticated caller

        Returns:
            The notification with its read flag set

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the caller is not the recipient
        """
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            notification = await self._get_owned(notification_id, recipient_id)
            if notification.is_read:
                return notification
            await self.notification_repository.mark_read(notification_id)
            return notification.model_copy(update={"is_read": True})

    async def mark_all_read(self, recipient_id: AccountId) -> int:
        """Mark every unread notification of the caller as read.

        Returns:
            Number of notifications flipped
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            updated = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info(
                "Notifications marked read", recipient_id=str(recipient_id), count=updated
            )
            return updated

    async def delete(
        self, notification_id: NotificationId, recipient_id: AccountId
    ) -> None:
        """Delete one notification owned by the caller.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the caller is not the recipient
        """
        with logfire.span(
            "notification_service.delete", notification_id=str(notification_id)
        ):
            await self._get_owned(notification_id, recipient_id)
            await self.notification_repository.delete(notification_id)
            logfire.info("Notification deleted", notification_id=str(notification_id))

    async def delete_many(
        self, notification_ids: Sequence[NotificationId], recipient_id: AccountId
    ) -> int:
        """Delete several notifications owned by the caller.

        The batch is all-or-nothing: one unknown or foreign id rejects the
        whole request before anything is deleted.

        Args:
            notification_ids: Notifications to delete
            recipient_id: The authenticated caller

        Returns:
            Number of notifications deleted

        Raises:
            NotFoundError: If any id is unknown
            ForbiddenError: If any notification belongs to someone else
        """
        unique_ids = list(dict.fromkeys(notification_ids))
        with logfire.span(
            "notification_service.delete_many",
            recipient_id=str(recipient_id),
            count=len(unique_ids),
        ):
            if not unique_ids:
                return 0

            found = await self.notification_repository.find_by_ids(unique_ids)
            found_ids = {n.id for n in found}
            missing = [i for i in unique_ids if i not in found_ids]
            if missing:
                raise NotFoundError("Notification", str(missing[0]))

            foreign = [n for n in found if n.recipient_id != recipient_id]
            if foreign:
                logfire.warn(
                    "Bulk delete includes foreign notifications",
                    account_id=str(recipient_id),
                    foreign_count=len(foreign),
                )
                raise ForbiddenError(
                    "Notification", str(foreign[0].id), str(recipient_id)
                )

            deleted = await self.notification_repository.delete_many(unique_ids)
            logfire.info(
                "Notifications deleted", recipient_id=str(recipient_id), count=deleted
            )
            return deleted

    async def list_notifications(
        self,
        recipient_id: AccountId,
        filter: Union[NotificationFilter, str] = NotificationFilter.ALL,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """List one page of the caller's inbox, newest first.

        Args:
            recipient_id: The authenticated caller
            filter: ALL or UNREAD, as the enum or its string value
            search: Optional case-insensitive substring over the message and
                the actor's handle and display name
            limit: Page size
            offset: Rows to skip

        Returns:
            Notifications in reverse-chronological order

        Raises:
            ValidationError: If the filter is not a known value
        """
        search = search.strip() if search else None
        return await self.notification_repository.list_for_recipient(
            recipient_id,
            unread_only=_parse_filter(filter) is NotificationFilter.UNREAD,
            search=search or None,
            limit=limit,
            offset=offset,
        )

    async def iter_notifications(
        self,
        recipient_id: AccountId,
        filter: Union[NotificationFilter, str] = NotificationFilter.ALL,
        search: Optional[str] = None,
    ) -> AsyncIterator[Notification]:
        """Stream the caller's whole inbox, newest first, in batches."""
        offset = 0
        while True:
            page = await self.list_notifications(
                recipient_id, filter, search, limit=self.batch_size, offset=offset
            )
            for notification in page:
                yield notification
            if len(page) < self.batch_size:
                return
            offset += len(page)

    async def unread_count(self, recipient_id: AccountId) -> int:
        """Count the caller's unread notifications."""
        return await self.notification_repository.count_unread(recipient_id)
