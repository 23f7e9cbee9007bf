"""Notification inbox routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel, Field

from devconnect.application.usecase.notification import (
    DeleteNotificationsRequest,
    DeleteNotificationsResponse,
    DeleteNotificationsUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from devconnect.domain.service import JWTService
from devconnect.domain.value import NotificationFilter
from devconnect.interface.api.auth import require_account_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class DeleteNotificationsAPIRequest(BaseModel):
    """API request for deleting several notifications at once."""

    ids: list[str] = Field(min_length=1)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    filter: NotificationFilter = Query(default=NotificationFilter.ALL),
    search: str | None = Query(default=None, max_length=200),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first.

    Requires authentication.

    Args:
        list_notifications_use_case: List notifications use case from DI
        jwt_service: JWT service for token verification (injected)
        filter: ``all`` or ``unread``
        search: Case-insensitive match on message and actor name
        limit: Page size
        offset: Page offset
        auth_token: JWT token from cookie

    Returns:
        Page of notifications plus the unread count
    """
    recipient_id = require_account_id(jwt_service, auth_token, "read notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            recipient_id=recipient_id,
            filter=filter,
            search=search,
            limit=limit,
            offset=offset,
        )
    )


@router.post("/read-all", response_model=MarkReadResponse)
async def mark_all_read(
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkReadResponse:
    """Mark every notification of the caller as read."""
    recipient_id = require_account_id(jwt_service, auth_token, "read notifications")
    return await mark_read_use_case.execute(MarkReadRequest(recipient_id=recipient_id))


@router.post("/delete", response_model=DeleteNotificationsResponse)
async def delete_notifications(
    request: DeleteNotificationsAPIRequest,
    delete_notifications_use_case: FromDishka[DeleteNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteNotificationsResponse:
    """Delete several notifications.

    All ids must belong to the caller; otherwise nothing is deleted.
    """
    recipient_id = require_account_id(
        jwt_service, auth_token, "delete notifications"
    )
    return await delete_notifications_use_case.execute(
        DeleteNotificationsRequest(
            recipient_id=recipient_id, notification_ids=request.ids
        )
    )


@router.post("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkReadResponse:
    """Mark one notification as read."""
    recipient_id = require_account_id(jwt_service, auth_token, "read notifications")
    return await mark_read_use_case.execute(
        MarkReadRequest(recipient_id=recipient_id, notification_id=notification_id)
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationsResponse)
async def delete_notification(
    notification_id: str,
    delete_notifications_use_case: FromDishka[DeleteNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteNotificationsResponse:
    """Delete one notification owned by the caller."""
    recipient_id = require_account_id(
        jwt_service, auth_token, "delete notifications"
    )
    return await delete_notifications_use_case.execute(
        DeleteNotificationsRequest(
            recipient_id=recipient_id, notification_ids=[notification_id]
        )
    )
