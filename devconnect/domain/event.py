"""Domain events consumed by the notification fan-out engine.

Events are emitted after the originating write and carry only the facts
needed to derive notifications. Ownership is resolved by the fan-out
engine, never trusted from the event producer.
"""

from typing import Union

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import AccountId, ContentId, TargetKind


class LikeEvent(DomainModel):
    """An actor liked a content item."""

    actor_id: AccountId
    target_id: ContentId
    target_kind: TargetKind


class CommentEvent(DomainModel):
    """An actor commented on a content item."""

    actor_id: AccountId
    target_id: ContentId
    target_kind: TargetKind = TargetKind.POST


class FollowEvent(DomainModel):
    """An actor started following another account."""

    actor_id: AccountId
    followee_id: AccountId


class MentionEvent(DomainModel):
    """An actor mentioned another account in a content item."""

    actor_id: AccountId
    mentioned_id: AccountId
    target_id: ContentId
    target_kind: TargetKind


EngagementEvent = Union[LikeEvent, CommentEvent, FollowEvent, MentionEvent]
