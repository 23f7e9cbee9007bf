"""Dependency injection module."""

from typing import Type

from devconnect.util.di.application import ProdApplicationProvider
from devconnect.util.di.base import Component, ProviderBase
from devconnect.util.di.core import ProdConfigProvider
from devconnect.util.di.domain import ProdDomainProvider
from devconnect.util.di.infrastructure import (
    DeliveryProvider,
    PersistenceProvider,
    ProdDeliveryProvider,
    ProdPersistenceProvider,
)

# Concrete providers first, then the swappable infrastructure bases
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    DeliveryProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    A base without subclasses is itself concrete. Otherwise the subclass
    whose ``__is_mock__`` matches ``use_mock`` wins; mock subclasses only
    exist once ``tests.di`` has been imported.

    Raises:
        ValueError: If no subclass matches
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for candidate in subclasses:
        if candidate.__is_mock__ == use_mock:
            return candidate

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "DeliveryProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDeliveryProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
