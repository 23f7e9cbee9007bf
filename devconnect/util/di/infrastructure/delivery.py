"""Digest delivery infrastructure providers."""

from dishka import Scope, provide

from devconnect.adapter.delivery import LoggingDeliveryChannel, WebhookDeliveryChannel
from devconnect.config import DigestSettings
from devconnect.domain.service import DeliveryChannel
from devconnect.util.di.base import ProviderBase


class DeliveryProvider(ProviderBase):
    """Delivery component base."""

    __mock_component__ = "delivery"


class ProdDeliveryProvider(DeliveryProvider):
    """Production delivery provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_delivery_channel(self, digest_settings: DigestSettings) -> DeliveryChannel:
        """Provide the out-of-band delivery channel.

        Returns:
            Webhook channel when an endpoint is configured, otherwise a
            channel that only logs the payload
        """
        if digest_settings.webhook_url:
            return WebhookDeliveryChannel(
                webhook_url=digest_settings.webhook_url,
                timeout_seconds=digest_settings.timeout_seconds,
            )
        return LoggingDeliveryChannel()
