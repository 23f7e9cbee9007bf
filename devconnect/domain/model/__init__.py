"""Domain model entities for DevConnect."""

from devconnect.domain.model.account import Account, AccountSummary
from devconnect.domain.model.content import ContentRef
from devconnect.domain.model.follow import FollowEdge
from devconnect.domain.model.mark import EngagementMark, MarkToggle, Vote
from devconnect.domain.model.notification import (
    Notification,
    NotificationDraft,
    NotificationPreference,
)
from devconnect.domain.model.view import ViewRecord

__all__ = [
    "Account",
    "AccountSummary",
    "ContentRef",
    "EngagementMark",
    "FollowEdge",
    "MarkToggle",
    "Notification",
    "NotificationDraft",
    "NotificationPreference",
    "ViewRecord",
    "Vote",
]
