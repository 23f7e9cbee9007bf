"""Domain value objects for DevConnect.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from devconnect.domain.value.common import RootValueObject


class Rank(str, Enum):
    """Profile rank tier, derived from follower count."""

    ROOKIE = "Rookie"
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    DIAMOND = "Diamond"


class TargetKind(str, Enum):
    """Kind of content an engagement mark can point at."""

    POST = "post"
    COMMENT = "comment"
    REEL = "reel"
    QUESTION = "question"
    ANSWER = "answer"

    @property
    def votable(self) -> bool:
        """Whether up/down votes apply to this kind (Q&A only)."""
        return self in (TargetKind.QUESTION, TargetKind.ANSWER)


class MarkKind(str, Enum):
    """Kind of engagement mark."""

    LIKE = "like"
    BOOKMARK = "bookmark"


class VoteDirection(int, Enum):
    """Direction of a vote on a question or answer."""

    UP = 1
    DOWN = -1


class NotificationKind(str, Enum):
    """Kind of event a notification reports."""

    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"
    MENTION = "mention"


class NotificationTargetType(str, Enum):
    """Type of entity a notification links to."""

    POST = "post"
    COMMENT = "comment"
    REEL = "reel"
    QUESTION = "question"
    ANSWER = "answer"
    PROFILE = "profile"

    @classmethod
    def from_target_kind(cls, kind: TargetKind) -> "NotificationTargetType":
        """Map a content kind onto the notification link type."""
        return cls(kind.value)


class NotificationFilter(str, Enum):
    """Inbox listing filter."""

    ALL = "all"
    UNREAD = "unread"


class NotificationOrigin(str, Enum):
    """Who is inserting a notification row.

    FANOUT is the trusted engagement path. CLIENT is a direct caller and is
    only ever allowed to record its own follow notification.
    """

    FANOUT = "fanout"
    CLIENT = "client"


class ViewState(str, Enum):
    """State of a playback session in the view tracker.

    State Flow:
        IDLE -> PENDING (play) -> COUNTED (threshold reached)
        PENDING -> IDLE (pause/stop before threshold)
    """

    IDLE = "idle"
    PENDING = "pending"
    COUNTED = "counted"


class Handle(RootValueObject[str]):
    """Public account handle (username)."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
