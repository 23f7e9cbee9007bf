"""Out-of-band delivery channels.

The webhook channel hands digest messages to the email/push sender over
HTTP. The logging channel is used when no sender is configured.
"""

import asyncio
from typing import Optional

import httpx
import logfire

from devconnect.adapter.error import DeliveryError
from devconnect.domain.service.digest_service import DeliveryChannel, DigestMessage


class WebhookDeliveryChannel(DeliveryChannel):
    """POSTs each digest message as JSON to the configured sender."""

    def __init__(self, webhook_url: str, timeout_seconds: float = 5.0) -> None:
        """Initialize webhook channel.

        Args:
            webhook_url: Endpoint of the delivery collaborator
            timeout_seconds: HTTP timeout per request
        """
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds

    async def send(self, message: DigestMessage) -> None:
        """Deliver one message.

        Raises:
            DeliveryError: If the sender answers with an error or is unreachable
        """
        payload = message.model_dump(mode="json")
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    timeout=self.timeout_seconds,
                )

                if response.status_code >= 400:
                    logfire.error(
                        "Delivery webhook rejected message",
                        status_code=response.status_code,
                        notification_id=payload["notification_id"],
                    )
                    raise DeliveryError(
                        f"Delivery failed: {response.status_code}",
                        status_code=response.status_code,
                    )

        except httpx.HTTPError as e:
            logfire.error("Delivery webhook HTTP error", error=str(e))
            raise DeliveryError(f"HTTP error during delivery: {e}")


class LoggingDeliveryChannel(DeliveryChannel):
    """Logs messages instead of sending them."""

    async def send(self, message: DigestMessage) -> None:
        """Log the message."""
        logfire.info(
            "Digest message (no sender configured)",
            recipient_id=str(message.recipient_id),
            notification_id=str(message.notification_id),
            subject=message.subject,
            link=message.link,
        )


class MockDeliveryChannel(DeliveryChannel):
    """Mock delivery channel for testing.

    Records every message. Can be told to fail or to hang so tests can
    exercise the dispatcher's error and timeout handling.
    """

    def __init__(self) -> None:
        self.sent: list[DigestMessage] = []
        self.fail_with: Optional[Exception] = None
        self.delay_seconds: float = 0.0

    async def send(self, message: DigestMessage) -> None:
        """Record the message, after the configured delay or failure."""
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(message)
