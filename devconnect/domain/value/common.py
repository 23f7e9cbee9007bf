"""Base class for single-value wrappers."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, compared by value.

    ``model_dump()`` returns the wrapped primitive, so wrappers such as
    ``Handle`` serialize the same way the raw string would.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
