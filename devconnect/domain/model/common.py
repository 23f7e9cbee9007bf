"""Base model for engagement entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model shared by entities, events and value records.

    State changes go through ``model_copy(update=...)`` so a row read inside a
    transaction is never mutated in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
