"""SQLAlchemy table definitions for DevConnect engagement.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(255), nullable=False),
    Column("display_name", String(255), nullable=True),
    Column("email", String(255), nullable=True),  # Digest delivery address
    Column("rank", String(20), nullable=False, server_default="Rookie"),
    Column("is_private", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "rank IN ('Rookie', 'Bronze', 'Silver', 'Gold', 'Platinum', 'Diamond')",
        name="valid_rank",
    ),
)

Index("idx_accounts_handle_lower", func.lower(accounts_table.c.handle), unique=True)

# ============================================================================
# FOLLOW EDGES TABLE
# ============================================================================
follow_edges_table = Table(
    "follow_edges",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "follower_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "followee_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("follower_id", "followee_id", name="uq_follow_edge"),
    CheckConstraint("follower_id <> followee_id", name="no_self_follow"),
)

Index("idx_follow_edges_followee", follow_edges_table.c.followee_id)

# ============================================================================
# CONTENT ITEMS TABLE (ownership projection from the content services)
# ============================================================================
content_items_table = Table(
    "content_items",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("kind", String(20), nullable=False),
    Column(
        "owner_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("view_count", Integer, nullable=False, server_default="0"),
    CheckConstraint(
        "kind IN ('post', 'comment', 'reel', 'question', 'answer')",
        name="valid_content_kind",
    ),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
)

Index("idx_content_items_owner", content_items_table.c.owner_id)

# ============================================================================
# ENGAGEMENT MARKS TABLE (likes, bookmarks)
# ============================================================================
engagement_marks_table = Table(
    "engagement_marks",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "actor_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("target_kind", String(20), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("mark_kind", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "actor_id", "target_kind", "target_id", "mark_kind", name="uq_engagement_mark"
    ),
    CheckConstraint("mark_kind IN ('like', 'bookmark')", name="valid_mark_kind"),
)

Index(
    "idx_engagement_marks_target",
    engagement_marks_table.c.target_kind,
    engagement_marks_table.c.target_id,
    engagement_marks_table.c.mark_kind,
)

# ============================================================================
# VOTES TABLE (questions and answers)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "actor_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("target_kind", String(20), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("direction", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("actor_id", "target_id", name="uq_vote"),
    CheckConstraint("direction IN (-1, 1)", name="valid_direction"),
    CheckConstraint("target_kind IN ('question', 'answer')", name="votable_kind"),
)

Index("idx_votes_target", votes_table.c.target_id)

# ============================================================================
# VIEW RECORDS TABLE
# ============================================================================
view_records_table = Table(
    "view_records",
    metadata,
    Column("session_id", UUID, nullable=False),
    Column(
        "viewer_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "content_id",
        UUID,
        ForeignKey("content_items.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("session_id", "viewer_id", "content_id", name="pk_view"),
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "actor_id", UUID, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True
    ),
    Column("kind", String(20), nullable=False),
    Column("target_id", UUID, nullable=True),
    Column("target_type", String(20), nullable=True),
    Column("message", Text, nullable=False),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "kind IN ('like', 'comment', 'follow', 'mention')",
        name="valid_notification_kind",
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    postgresql_where=notifications_table.c.is_read.is_(False),
)

# ============================================================================
# NOTIFICATION PREFERENCES TABLE
# ============================================================================
notification_preferences_table = Table(
    "notification_preferences",
    metadata,
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("email_enabled", Boolean, nullable=False, server_default="true"),
    Column("likes", Boolean, nullable=False, server_default="true"),
    Column("comments", Boolean, nullable=False, server_default="true"),
    Column("follows", Boolean, nullable=False, server_default="true"),
    Column("mentions", Boolean, nullable=False, server_default="true"),
)
