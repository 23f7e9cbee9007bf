"""Delete notifications use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from devconnect.domain.service import NotificationService
from devconnect.domain.value import AccountId, NotificationId


class DeleteNotificationsRequest(BaseModel):
    """Delete notifications request."""

    recipient_id: str  # Authenticated caller
    notification_ids: list[str] = Field(min_length=1)


class DeleteNotificationsResponse(BaseModel):
    """Delete notifications response."""

    deleted: int


class DeleteNotificationsUseCase:
    """Use case for deleting one or several of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationsRequest
    ) -> DeleteNotificationsResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If any notification does not exist
            ForbiddenError: If any notification belongs to someone else
        """
        recipient_id = AccountId(UUID(request.recipient_id))
        ids = [NotificationId(UUID(i)) for i in request.notification_ids]

        if len(ids) == 1:
            await self.notification_service.delete(ids[0], recipient_id)
            return DeleteNotificationsResponse(deleted=1)

        deleted = await self.notification_service.delete_many(ids, recipient_id)
        return DeleteNotificationsResponse(deleted=deleted)
