"""Notification inbox use cases."""

from .delete_notifications import (
    DeleteNotificationsRequest,
    DeleteNotificationsResponse,
    DeleteNotificationsUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase

__all__ = [
    "DeleteNotificationsRequest",
    "DeleteNotificationsResponse",
    "DeleteNotificationsUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
    "NotificationItem",
]
