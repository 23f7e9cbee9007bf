"""Out-of-band digest dispatch.

After a notification commits, the recipient may also get an email or push
copy. Delivery is best effort: it runs in the background under a timeout,
failures are logged and dropped, and nothing is retried. The stored
notification is never affected by the outcome.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

import logfire

from devconnect.config import DigestSettings
from devconnect.domain.model import Account, Notification
from devconnect.domain.model.common import DomainModel
from devconnect.domain.repository import AccountRepository
from devconnect.domain.value import (
    AccountId,
    NotificationId,
    NotificationKind,
    NotificationTargetType,
)

from .base import Service
from .preference_service import PreferenceService

DIGEST_SUBJECT = "New notification from DevConnect"


class DigestMessage(DomainModel):
    """Payload handed to a delivery channel."""

    recipient_id: AccountId
    notification_id: NotificationId
    kind: NotificationKind
    email: Optional[str] = None
    subject: str
    body: str
    link: str


class DeliveryChannel(ABC):
    """Abstract sender for out-of-band notification copies.

    Implementations (webhook, mock) live in the adapter layer.
    """

    @abstractmethod
    async def send(self, message: DigestMessage) -> None:
        """Deliver one message.

        Raises:
            DeliveryError: If the collaborator rejects the message
        """
        pass


class DeliveryPool:
    """Runs deliveries as background tasks and keeps them referenced.

    Shared by every request so in-flight deliveries outlive the request
    that scheduled them.
    """

    def __init__(self, channel: DeliveryChannel, timeout_seconds: float) -> None:
        self.channel = channel
        self.timeout_seconds = timeout_seconds
        self._tasks: set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        """Number of deliveries not finished yet."""
        return len(self._tasks)

    def submit(self, message: DigestMessage) -> asyncio.Task:
        """Schedule a delivery without waiting for it."""
        task = asyncio.get_running_loop().create_task(self._deliver(message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _deliver(self, message: DigestMessage) -> None:
        with logfire.span(
            "digest.deliver",
            notification_id=str(message.notification_id),
            recipient_id=str(message.recipient_id),
        ):
            try:
                await asyncio.wait_for(
                    self.channel.send(message), timeout=self.timeout_seconds
                )
                logfire.info(
                    "Digest delivered", notification_id=str(message.notification_id)
                )
            except asyncio.TimeoutError:
                logfire.warn(
                    "Digest delivery timed out",
                    notification_id=str(message.notification_id),
                    timeout_seconds=self.timeout_seconds,
                )
            except Exception as e:
                logfire.error(
                    "Digest delivery failed",
                    notification_id=str(message.notification_id),
                    error=str(e),
                )

    async def drain(self) -> None:
        """Wait for every in-flight delivery to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


class DigestDispatcher(Service):
    """Decides whether a committed notification gets an out-of-band copy."""

    def __init__(
        self,
        preference_service: PreferenceService,
        account_repository: AccountRepository,
        delivery_pool: DeliveryPool,
        digest_settings: DigestSettings,
    ) -> None:
        """Initialize digest dispatcher.

        Args:
            preference_service: Preference lookups
            account_repository: Recipient and actor lookups
            delivery_pool: Background delivery runner
            digest_settings: Digest configuration
        """
        self.preference_service = preference_service
        self.account_repository = account_repository
        self.delivery_pool = delivery_pool
        self.digest_settings = digest_settings

    async def dispatch(self, notification: Notification) -> Optional[asyncio.Task]:
        """Schedule delivery of a committed notification if preferences allow.

        Args:
            notification: A notification that is already committed

        Returns:
            The scheduled delivery task, or None when skipped
        """
        with logfire.span(
            "digest_dispatcher.dispatch",
            notification_id=str(notification.id),
            recipient_id=str(notification.recipient_id),
            kind=notification.kind.value,
        ):
            if not self.digest_settings.enabled:
                return None

            allowed = await self.preference_service.allows_email(
                notification.recipient_id, notification.kind
            )
            if not allowed:
                logfire.info(
                    "Digest skipped by preferences",
                    notification_id=str(notification.id),
                    kind=notification.kind.value,
                )
                return None

            message = await self.build_message(notification)
            return self.delivery_pool.submit(message)

    async def build_message(self, notification: Notification) -> DigestMessage:
        """Render the subject, body and deep link of a notification."""
        recipient = await self.account_repository.find_by_id(notification.recipient_id)
        actor: Optional[Account] = None
        if notification.actor_id:
            actor = await self.account_repository.find_by_id(notification.actor_id)

        actor_name = "Someone"
        if actor:
            actor_name = actor.display_name or actor.handle.root

        link = self.build_link(notification)
        return DigestMessage(
            recipient_id=notification.recipient_id,
            notification_id=notification.id,
            kind=notification.kind,
            email=recipient.email if recipient else None,
            subject=DIGEST_SUBJECT,
            body=f"{actor_name} {notification.message}. View it here: {link}",
            link=link,
        )

    def build_link(self, notification: Notification) -> str:
        """Deep link to the entity a notification points at."""
        base_url = self.digest_settings.base_url.rstrip("/")
        target_id = notification.target_id
        target_type = notification.target_type

        if target_type is NotificationTargetType.PROFILE and notification.actor_id:
            return f"{base_url}/profile/{notification.actor_id}"
        if target_id is None:
            return f"{base_url}/notifications"
        if target_type is NotificationTargetType.POST:
            return f"{base_url}/posts/{target_id}"
        if target_type is NotificationTargetType.COMMENT:
            return f"{base_url}/posts/{target_id}#comments"
        if target_type is NotificationTargetType.REEL:
            return f"{base_url}/reels/{target_id}"
        if target_type in (
            NotificationTargetType.QUESTION,
            NotificationTargetType.ANSWER,
        ):
            return f"{base_url}/questions/{target_id}"
        return f"{base_url}/notifications"

    async def drain(self) -> None:
        """Wait for in-flight deliveries (shutdown and tests)."""
        await self.delivery_pool.drain()
