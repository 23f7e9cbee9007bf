"""Out-of-band delivery adapter."""

from .client import LoggingDeliveryChannel, MockDeliveryChannel, WebhookDeliveryChannel

__all__ = ["LoggingDeliveryChannel", "MockDeliveryChannel", "WebhookDeliveryChannel"]
