"""Mark notifications read use cases."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import NotificationService
from devconnect.domain.value import AccountId, NotificationId


class MarkReadRequest(BaseModel):
    """Mark read request.

    Without a notification id every unread notification of the caller is
    marked read.
    """

    recipient_id: str  # Authenticated caller
    notification_id: Optional[str] = None


class MarkReadResponse(BaseModel):
    """Mark read response."""

    updated: int
    unread_count: int


class MarkReadUseCase:
    """Use case for marking one or all notifications read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the caller is not the recipient
        """
        recipient_id = AccountId(UUID(request.recipient_id))

        if request.notification_id:
            notification_id = NotificationId(UUID(request.notification_id))
            await self.notification_service.mark_read(notification_id, recipient_id)
            updated = 1
        else:
            updated = await self.notification_service.mark_all_read(recipient_id)

        unread_count = await self.notification_service.unread_count(recipient_id)
        return MarkReadResponse(updated=updated, unread_count=unread_count)
