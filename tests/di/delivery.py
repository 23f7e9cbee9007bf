"""Mock delivery providers for testing."""

from dishka import Scope, provide

from devconnect.adapter.delivery import MockDeliveryChannel
from devconnect.domain.service import DeliveryChannel
from devconnect.util.di.infrastructure.delivery import DeliveryProvider


class MockDeliveryProvider(DeliveryProvider):
    """Mock delivery provider recording messages instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_delivery_channel(self) -> DeliveryChannel:
        """Provide recording delivery channel."""
        return MockDeliveryChannel()
