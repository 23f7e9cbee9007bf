"""List notifications use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from devconnect.domain.model import Notification
from devconnect.domain.service import NotificationService
from devconnect.domain.value import (
    AccountId,
    NotificationFilter,
    NotificationKind,
    NotificationTargetType,
)


class NotificationItem(BaseModel):
    """Notification as returned to its recipient."""

    id: str
    actor_id: Optional[str]
    kind: NotificationKind
    target_id: Optional[str]
    target_type: Optional[NotificationTargetType]
    message: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationItem":
        """Build the API view of a notification."""
        return cls(
            id=str(notification.id),
            actor_id=str(notification.actor_id) if notification.actor_id else None,
            kind=notification.kind,
            target_id=str(notification.target_id) if notification.target_id else None,
            target_type=notification.target_type,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    recipient_id: str  # Authenticated caller
    filter: NotificationFilter = NotificationFilter.ALL
    search: Optional[str] = None
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    items: list[NotificationItem]
    unread_count: int
    has_more: bool


class ListNotificationsUseCase:
    """Use case for reading the caller's inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        recipient_id = AccountId(UUID(request.recipient_id))

        # Fetch one extra row to know whether another page exists
        rows = await self.notification_service.list_notifications(
            recipient_id,
            filter=request.filter,
            search=request.search,
            limit=request.limit + 1,
            offset=request.offset,
        )
        unread_count = await self.notification_service.unread_count(recipient_id)

        return ListNotificationsResponse(
            items=[NotificationItem.from_domain(n) for n in rows[: request.limit]],
            unread_count=unread_count,
            has_more=len(rows) > request.limit,
        )
