"""Mock providers for testing."""

from .delivery import MockDeliveryProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockDeliveryProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
