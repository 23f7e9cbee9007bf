"""Domain value objects for DevConnect."""

from devconnect.domain.value.identifiers import (
    AccountId,
    ContentId,
    FollowEdgeId,
    MarkId,
    NotificationId,
    ViewSessionId,
    VoteId,
)
from devconnect.domain.value.types import (
    Handle,
    MarkKind,
    NotificationFilter,
    NotificationKind,
    NotificationOrigin,
    NotificationTargetType,
    Rank,
    TargetKind,
    ViewState,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "AccountId",
    "ContentId",
    "FollowEdgeId",
    "MarkId",
    "NotificationId",
    "ViewSessionId",
    "VoteId",
    # Types
    "Handle",
    "MarkKind",
    "NotificationFilter",
    "NotificationKind",
    "NotificationOrigin",
    "NotificationTargetType",
    "Rank",
    "TargetKind",
    "ViewState",
    "VoteDirection",
]
