"""Engagement ledger entities.

Marks (likes, bookmarks) and votes are scoped to exactly one
(actor, target) pair. Counts are always derived from these rows.
"""

from datetime import datetime

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import (
    AccountId,
    ContentId,
    MarkId,
    MarkKind,
    TargetKind,
    VoteDirection,
    VoteId,
)


class EngagementMark(DomainModel):
    """A like or bookmark by one actor on one target.

    Unique on (actor_id, target_kind, target_id, mark_kind).
    """

    id: MarkId
    actor_id: AccountId
    target_id: ContentId
    target_kind: TargetKind
    mark_kind: MarkKind
    created_at: datetime = Field(default_factory=datetime.now)


class Vote(DomainModel):
    """Up/down vote on a question or answer.

    Unique on (actor_id, target_id); a repeat vote replaces the direction.
    """

    id: VoteId
    actor_id: AccountId
    target_id: ContentId
    target_kind: TargetKind
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class MarkToggle(DomainModel):
    """Outcome of a toggle: whether the mark is now live, and the new count."""

    active: bool
    new_count: int = Field(ge=0)
