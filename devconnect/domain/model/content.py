"""Content ownership facts.

Posts, reels, questions, answers and comments are owned by external CRUD
services. This service only needs to know who owns an item and keeps the
running view counter for it.
"""

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import AccountId, ContentId, TargetKind


class ContentRef(DomainModel):
    """Reference to a content item and its owner."""

    id: ContentId
    kind: TargetKind
    owner_id: AccountId
    view_count: int = Field(default=0, ge=0)
