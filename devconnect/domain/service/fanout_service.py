"""Notification fan-out engine.

Turns engagement events into inbox rows. The rules are pure; ``publish``
resolves ownership, inserts the rows inside the caller's transaction and
hands each new row to the digest dispatcher once that transaction commits.
"""

from functools import partial
from typing import Optional

import logfire

from devconnect.domain.error import NotFoundError
from devconnect.domain.event import (
    CommentEvent,
    EngagementEvent,
    FollowEvent,
    LikeEvent,
    MentionEvent,
)
from devconnect.domain.model import Notification, NotificationDraft
from devconnect.domain.repository import (
    AccountRepository,
    ContentRepository,
    TransactionManager,
)
from devconnect.domain.value import (
    AccountId,
    NotificationKind,
    NotificationOrigin,
    NotificationTargetType,
)

from .base import Service
from .digest_service import DigestDispatcher
from .notification_service import NotificationService


class FanoutService(Service):
    """Derives and stores the notifications caused by an engagement event."""

    def __init__(
        self,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
        digest_dispatcher: DigestDispatcher,
        transaction_manager: TransactionManager,
    ) -> None:
        self.content_repository = content_repository
        self.account_repository = account_repository
        self.notification_service = notification_service
        self.digest_dispatcher = digest_dispatcher
        self.transaction_manager = transaction_manager

    @staticmethod
    def derive(
        event: EngagementEvent, owner_id: Optional[AccountId] = None
    ) -> list[NotificationDraft]:
        """Apply the fan-out rules to one event.

        Like and comment events notify the content owner; follow events
        notify the followee; mention events notify the mentioned account.
        Nobody is ever notified about their own action.

        Args:
            event: The engagement event
            owner_id: Owner of the target content (like and comment events)

        Returns:
            Zero or one notification drafts
        """
        if isinstance(event, LikeEvent):
            if owner_id is None or owner_id == event.actor_id:
                return []
            return [
                NotificationDraft(
                    recipient_id=owner_id,
                    actor_id=event.actor_id,
                    kind=NotificationKind.LIKE,
                    target_id=event.target_id,
                    target_type=NotificationTargetType.from_target_kind(
                        event.target_kind
                    ),
                    message=f"liked your {event.target_kind.value}",
                )
            ]

        if isinstance(event, CommentEvent):
            if owner_id is None or owner_id == event.actor_id:
                return []
            return [
                NotificationDraft(
                    recipient_id=owner_id,
                    actor_id=event.actor_id,
                    kind=NotificationKind.COMMENT,
                    target_id=event.target_id,
                    target_type=NotificationTargetType.from_target_kind(
                        event.target_kind
                    ),
                    message=f"commented on your {event.target_kind.value}",
                )
            ]

        if isinstance(event, FollowEvent):
            if event.followee_id == event.actor_id:
                return []
            return [
                NotificationDraft(
                    recipient_id=event.followee_id,
                    actor_id=event.actor_id,
                    kind=NotificationKind.FOLLOW,
                    target_id=event.followee_id,
                    target_type=NotificationTargetType.PROFILE,
                    message="started following you",
                )
            ]

        if isinstance(event, MentionEvent):
            if event.mentioned_id == event.actor_id:
                return []
            return [
                NotificationDraft(
                    recipient_id=event.mentioned_id,
                    actor_id=event.actor_id,
                    kind=NotificationKind.MENTION,
                    target_id=event.target_id,
                    target_type=NotificationTargetType.from_target_kind(
                        event.target_kind
                    ),
                    message=f"mentioned you in a {event.target_kind.value}",
                )
            ]

        raise TypeError(f"Unsupported event: {type(event).__name__}")

    async def _resolve_owner(self, event: EngagementEvent) -> Optional[AccountId]:
        if isinstance(event, (LikeEvent, CommentEvent)):
            content = await self.content_repository.find_by_id(event.target_id)
            if not content:
                raise NotFoundError("Content", str(event.target_id))
            return content.owner_id
        return None

    async def publish(self, event: EngagementEvent) -> list[Notification]:
        """Store the notifications for an event and queue their digests.

        Runs inside the caller's transaction when one is open, so the rows
        commit or roll back with the engagement write that caused them.

        Args:
            event: The engagement event

        Returns:
            The notifications created (possibly none)

        Raises:
            NotFoundError: If the event's target content is unknown
        """
        with logfire.span(
            "fanout_service.publish",
            event=type(event).__name__,
            actor_id=str(event.actor_id),
        ):
            owner_id = await self._resolve_owner(event)
            drafts = self.derive(event, owner_id)
            if not drafts:
                logfire.info(
                    "Fan-out suppressed",
                    event=type(event).__name__,
                    actor_id=str(event.actor_id),
                )
                return []

            created: list[Notification] = []
            async with self.transaction_manager.atomic():
                for draft in drafts:
                    notification = await self.notification_service.create(
                        draft, origin=NotificationOrigin.FANOUT
                    )
                    self.transaction_manager.on_commit(
                        partial(self.digest_dispatcher.dispatch, notification)
                    )
                    created.append(notification)
            return created
