"""Follow edge entity."""

from datetime import datetime

from pydantic import Field, model_validator

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import AccountId, FollowEdgeId


class FollowEdge(DomainModel):
    """Directed follower -> followee relationship.

    Business rules:
    - No self-edges
    - At most one edge per ordered pair (enforced by unique constraint)
    - Only the follower creates or deletes the edge
    """

    id: FollowEdgeId
    follower_id: AccountId
    followee_id: AccountId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_not_self(self) -> "FollowEdge":
        """Reject self-edges at construction time."""
        if self.follower_id == self.followee_id:
            raise ValueError("An account cannot follow itself")
        return self
