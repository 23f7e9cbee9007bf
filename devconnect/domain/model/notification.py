"""Notification and preference entities."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import (
    AccountId,
    NotificationId,
    NotificationKind,
    NotificationTargetType,
)


class NotificationDraft(DomainModel):
    """A notification derived from a domain event, not yet stored."""

    recipient_id: AccountId
    actor_id: Optional[AccountId] = None
    kind: NotificationKind
    target_id: Optional[UUID] = None
    target_type: Optional[NotificationTargetType] = None
    message: str = Field(min_length=1, max_length=500)


class Notification(DomainModel):
    """Inbox entry owned by its recipient.

    Lifecycle: created (unread) -> read -> deleted. Only the recipient may
    flip the read flag or delete the row.
    """

    id: NotificationId
    recipient_id: AccountId
    actor_id: Optional[AccountId] = None
    kind: NotificationKind
    target_id: Optional[UUID] = None
    target_type: Optional[NotificationTargetType] = None
    message: str
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)


class NotificationPreference(DomainModel):
    """Per-account out-of-band delivery settings.

    Defaults mirror a fresh account: email on, every kind on.
    """

    account_id: AccountId
    email_enabled: bool = True
    likes: bool = True
    comments: bool = True
    follows: bool = True
    mentions: bool = True

    def allows(self, kind: NotificationKind) -> bool:
        """Whether an out-of-band copy of this kind may be sent."""
        if not self.email_enabled:
            return False
        return {
            NotificationKind.LIKE: self.likes,
            NotificationKind.COMMENT: self.comments,
            NotificationKind.FOLLOW: self.follows,
            NotificationKind.MENTION: self.mentions,
        }[kind]
