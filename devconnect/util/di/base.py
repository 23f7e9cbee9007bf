"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests can swap for in-process doubles
Component = Literal["persistence", "delivery"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick prod or mock wiring.

    Attributes:
        __mock_component__: Component a mockable base stands for, None on
            concrete providers
        __is_mock__: True on test doubles registered under ``tests.di``
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
