"""initial_schema

Create the engagement schema for DevConnect:
- Accounts (handle, rank, privacy flag)
- Follow edges (one per ordered pair, no self edges)
- Content items (ownership projection of posts, comments, reels, questions, answers)
- Engagement marks (likes and bookmarks)
- Votes (questions and answers, one per actor and target)
- View records (one per session, viewer and content item)
- Notifications and notification preferences

Revision ID: 3c1f0d2a9b7e
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0d2a9b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("handle", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("rank", sa.String(20), nullable=False, server_default="Rookie"),
        sa.Column("is_private", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "rank IN ('Rookie', 'Bronze', 'Silver', 'Gold', 'Platinum', 'Diamond')",
            name="valid_rank",
        ),
    )
    op.create_index(
        "idx_accounts_handle_lower",
        "accounts",
        [sa.text("lower(handle)")],
        unique=True,
    )

    # ========================================================================
    # FOLLOW_EDGES table
    # ========================================================================
    op.create_table(
        "follow_edges",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("follower_id", sa.UUID(), nullable=False),
        sa.Column("followee_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["follower_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["followee_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "followee_id", name="uq_follow_edge"),
        sa.CheckConstraint("follower_id <> followee_id", name="no_self_follow"),
    )
    op.create_index("idx_follow_edges_followee", "follow_edges", ["followee_id"])

    # ========================================================================
    # CONTENT_ITEMS table (ownership projection)
    # ========================================================================
    op.create_table(
        "content_items",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["owner_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "kind IN ('post', 'comment', 'reel', 'question', 'answer')",
            name="valid_content_kind",
        ),
        sa.CheckConstraint("view_count >= 0", name="view_count_non_negative"),
    )
    op.create_index("idx_content_items_owner", "content_items", ["owner_id"])

    # ========================================================================
    # ENGAGEMENT_MARKS table (likes, bookmarks)
    # ========================================================================
    op.create_table(
        "engagement_marks",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("target_kind", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("mark_kind", sa.String(20), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["actor_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "actor_id",
            "target_kind",
            "target_id",
            "mark_kind",
            name="uq_engagement_mark",
        ),
        sa.CheckConstraint("mark_kind IN ('like', 'bookmark')", name="valid_mark_kind"),
    )
    op.create_index(
        "idx_engagement_marks_target",
        "engagement_marks",
        ["target_kind", "target_id", "mark_kind"],
    )

    # ========================================================================
    # VOTES table (questions and answers)
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("target_kind", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("direction", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["actor_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("actor_id", "target_id", name="uq_vote"),
        sa.CheckConstraint("direction IN (-1, 1)", name="valid_direction"),
        sa.CheckConstraint("target_kind IN ('question', 'answer')", name="votable_kind"),
    )
    op.create_index("idx_votes_target", "votes", ["target_id"])

    # ========================================================================
    # VIEW_RECORDS table
    # ========================================================================
    op.create_table(
        "view_records",
        sa.Column("session_id", sa.UUID(), nullable=False),
        sa.Column("viewer_id", sa.UUID(), nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["viewer_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["content_id"], ["content_items.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("session_id", "viewer_id", "content_id", name="pk_view"),
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=True),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=True),
        sa.Column("target_type", sa.String(20), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["recipient_id"], ["accounts.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["actor_id"], ["accounts.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "kind IN ('like', 'comment', 'follow', 'mention')",
            name="valid_notification_kind",
        ),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_notifications_recipient_unread",
        "notifications",
        ["recipient_id"],
        postgresql_where=sa.text("is_read = false"),
    )

    # ========================================================================
    # NOTIFICATION_PREFERENCES table
    # ========================================================================
    op.create_table(
        "notification_preferences",
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column(
            "email_enabled", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("likes", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("comments", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("follows", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("mentions", sa.Boolean(), nullable=False, server_default="true"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("account_id"),
    )

    # Trigger function to update updated_at timestamp
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_accounts_updated_at
        BEFORE UPDATE ON accounts
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    op.execute("""
        CREATE TRIGGER update_votes_updated_at
        BEFORE UPDATE ON votes
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TRIGGER IF EXISTS update_votes_updated_at ON votes")
    op.execute("DROP TRIGGER IF EXISTS update_accounts_updated_at ON accounts")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("notification_preferences")
    op.drop_table("notifications")
    op.drop_table("view_records")
    op.drop_table("votes")
    op.drop_table("engagement_marks")
    op.drop_table("content_items")
    op.drop_table("follow_edges")
    op.drop_table("accounts")
