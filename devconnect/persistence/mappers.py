"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from devconnect.domain.model import (
    Account,
    AccountSummary,
    ContentRef,
    EngagementMark,
    FollowEdge,
    Notification,
    NotificationPreference,
    Vote,
)
from devconnect.domain.value import (
    AccountId,
    ContentId,
    FollowEdgeId,
    Handle,
    MarkId,
    MarkKind,
    NotificationId,
    NotificationKind,
    NotificationTargetType,
    Rank,
    TargetKind,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        display_name=row.get("display_name"),
        email=row.get("email"),
        rank=Rank(row["rank"]),
        is_private=row["is_private"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    return {
        "id": account.id,
        "handle": account.handle.root,
        "display_name": account.display_name,
        "email": account.email,
        "rank": account.rank.value,
        "is_private": account.is_private,
        "created_at": account.created_at,
        "updated_at": account.updated_at,
    }


def row_to_account_summary(row: Dict[str, Any]) -> AccountSummary:
    """Convert an accounts row (or joined subset) to AccountSummary."""
    return AccountSummary(
        id=AccountId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        display_name=row.get("display_name"),
        rank=Rank(row["rank"]),
    )


def row_to_follow_edge(row: Dict[str, Any]) -> FollowEdge:
    """Convert database row to FollowEdge domain model."""
    return FollowEdge(
        id=FollowEdgeId(_uuid(row["id"])),
        follower_id=AccountId(_uuid(row["follower_id"])),
        followee_id=AccountId(_uuid(row["followee_id"])),
        created_at=row["created_at"],
    )


def follow_edge_to_dict(edge: FollowEdge) -> Dict[str, Any]:
    """Convert FollowEdge domain model to database dict."""
    return edge.model_dump()


def row_to_mark(row: Dict[str, Any]) -> EngagementMark:
    """Convert database row to EngagementMark domain model."""
    return EngagementMark(
        id=MarkId(_uuid(row["id"])),
        actor_id=AccountId(_uuid(row["actor_id"])),
        target_id=ContentId(_uuid(row["target_id"])),
        target_kind=TargetKind(row["target_kind"]),
        mark_kind=MarkKind(row["mark_kind"]),
        created_at=row["created_at"],
    )


def mark_to_dict(mark: EngagementMark) -> Dict[str, Any]:
    """Convert EngagementMark domain model to database dict."""
    return {
        "id": mark.id,
        "actor_id": mark.actor_id,
        "target_id": mark.target_id,
        "target_kind": mark.target_kind.value,
        "mark_kind": mark.mark_kind.value,
        "created_at": mark.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        actor_id=AccountId(_uuid(row["actor_id"])),
        target_id=ContentId(_uuid(row["target_id"])),
        target_kind=TargetKind(row["target_kind"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "actor_id": vote.actor_id,
        "target_id": vote.target_id,
        "target_kind": vote.target_kind.value,
        "direction": vote.direction.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }


def row_to_content(row: Dict[str, Any]) -> ContentRef:
    """Convert database row to ContentRef domain model."""
    return ContentRef(
        id=ContentId(_uuid(row["id"])),
        kind=TargetKind(row["kind"]),
        owner_id=AccountId(_uuid(row["owner_id"])),
        view_count=row["view_count"],
    )


def content_to_dict(content: ContentRef) -> Dict[str, Any]:
    """Convert ContentRef domain model to database dict."""
    return {
        "id": content.id,
        "kind": content.kind.value,
        "owner_id": content.owner_id,
        "view_count": content.view_count,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    target_id = row.get("target_id")
    target_type = row.get("target_type")
    actor_id = row.get("actor_id")
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=AccountId(_uuid(row["recipient_id"])),
        actor_id=AccountId(_uuid(actor_id)) if actor_id else None,
        kind=NotificationKind(row["kind"]),
        target_id=_uuid(target_id) if target_id else None,
        target_type=NotificationTargetType(target_type) if target_type else None,
        message=row["message"],
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "actor_id": notification.actor_id,
        "kind": notification.kind.value,
        "target_id": notification.target_id,
        "target_type": (
            notification.target_type.value if notification.target_type else None
        ),
        "message": notification.message,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
    }


def row_to_preference(row: Dict[str, Any]) -> NotificationPreference:
    """Convert database row to NotificationPreference domain model."""
    return NotificationPreference(
        account_id=AccountId(_uuid(row["account_id"])),
        email_enabled=row["email_enabled"],
        likes=row["likes"],
        comments=row["comments"],
        follows=row["follows"],
        mentions=row["mentions"],
    )


def preference_to_dict(preference: NotificationPreference) -> Dict[str, Any]:
    """Convert NotificationPreference domain model to database dict."""
    return preference.model_dump()
