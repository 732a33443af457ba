"""initial_loop_schema

Create the schema for Loop:
- Profiles (keyed by the Supabase auth user id, capability flags)
- Circles and circle members
- Loops (content tree, depth capped at 10) and their denormalized stats
- Loop interactions (one row per user, loop and type)
- Comments (one level of replies)
- Follows, notifications, live streams
- Outbox (failed side effects kept for replay)

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MAX_BRANCH_DEPTH = 10


def _create_enum(name: str, values: Sequence[str]) -> None:
    labels = ", ".join(f"'{value}'" for value in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def _enum(name: str, *values: str) -> postgresql.ENUM:
    return postgresql.ENUM(*values, name=name, create_type=False)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid()
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    _create_enum("circle_role", ["owner", "member"])
    _create_enum("loop_visibility", ["public", "private"])
    _create_enum("interaction_type", ["like", "save", "share", "view"])
    _create_enum("outbox_status", ["pending", "failed", "done"])

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),  # Supabase auth user id
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "is_moderator", sa.Boolean(), nullable=False, server_default="false"
        ),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    # ========================================================================
    # CIRCLES tables
    # ========================================================================
    op.create_table(
        "circles",
        _uuid_pk(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "circle_members",
        sa.Column("circle_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "role",
            _enum("circle_role", "owner", "member"),
            nullable=False,
            server_default="member",
        ),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["circle_id"], ["circles.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("circle_id", "user_id", name="uq_circle_member"),
    )
    op.create_index("idx_circle_members_user_id", "circle_members", ["user_id"])

    # ========================================================================
    # LOOPS table (content tree)
    # ========================================================================
    op.create_table(
        "loops",
        _uuid_pk(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("content", postgresql.JSONB(), nullable=False),
        sa.Column("circle_id", sa.UUID(), nullable=True),
        sa.Column(
            "visibility",
            _enum("loop_visibility", "public", "private"),
            nullable=False,
            server_default="public",
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["parent_id"], ["loops.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["circle_id"], ["circles.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            f"depth >= 0 AND depth <= {MAX_BRANCH_DEPTH}", name="check_loop_depth"
        ),
        sa.CheckConstraint(
            "(parent_id IS NULL) = (depth = 0)", name="check_loop_root_depth"
        ),
    )
    op.create_index("idx_loops_parent_id", "loops", ["parent_id", "created_at"])
    op.create_index(
        "idx_loops_author_created", "loops", ["author_id", "created_at"]
    )
    op.create_index(
        "idx_loops_public_roots",
        "loops",
        ["created_at"],
        postgresql_where=sa.text("parent_id IS NULL AND visibility = 'public'"),
    )

    # ========================================================================
    # LOOP_STATS table (denormalized counters, one row per loop)
    # ========================================================================
    op.create_table(
        "loop_stats",
        sa.Column("loop_id", sa.UUID(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("branches", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("saves", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("shares", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("loop_id"),
        sa.ForeignKeyConstraint(["loop_id"], ["loops.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "likes >= 0 AND branches >= 0 AND comments >= 0 "
            "AND saves >= 0 AND views >= 0 AND shares >= 0",
            name="check_loop_stats_non_negative",
        ),
    )

    # ========================================================================
    # LOOP_INTERACTIONS table
    # ========================================================================
    op.create_table(
        "loop_interactions",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("loop_id", sa.UUID(), nullable=False),
        sa.Column(
            "interaction_type",
            _enum("interaction_type", "like", "save", "share", "view"),
            nullable=False,
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["loop_id"], ["loops.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "user_id", "loop_id", "interaction_type", name="uq_user_loop_interaction"
        ),
    )
    op.create_index(
        "idx_loop_interactions_loop_created",
        "loop_interactions",
        ["loop_id", "created_at"],
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("loop_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["loop_id"], ["loops.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.CheckConstraint("length(text) > 0", name="check_comment_text_not_empty"),
    )
    op.create_index(
        "idx_comments_loop_created", "comments", ["loop_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # FOLLOWS table
    # ========================================================================
    op.create_table(
        "follows",
        _uuid_pk(),
        sa.Column("follower_id", sa.UUID(), nullable=False),
        sa.Column("following_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "following_id", name="uq_follow"),
        sa.CheckConstraint(
            "follower_id <> following_id", name="check_no_self_follow"
        ),
    )
    op.create_index("idx_follows_following_id", "follows", ["following_id"])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _uuid_pk(),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column(
            "data", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'")
        ),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", "created_at"],
    )

    # ========================================================================
    # LIVE_STREAMS table
    # ========================================================================
    op.create_table(
        "live_streams",
        _uuid_pk(),
        sa.Column("streamer_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("is_live", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("started_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("ended_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_live_streams_streamer_id", "live_streams", ["streamer_id"])

    # ========================================================================
    # OUTBOX table (failed side effects kept for replay)
    # ========================================================================
    op.create_table(
        "outbox",
        _uuid_pk(),
        sa.Column("kind", sa.String(50), nullable=False),
        sa.Column("payload", postgresql.JSONB(), nullable=False),
        sa.Column(
            "status",
            _enum("outbox_status", "pending", "failed", "done"),
            nullable=False,
            server_default="failed",
        ),
        sa.Column("attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_error", sa.Text(), nullable=True),
        _created_at(),
        sa.Column("processed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_outbox_status_created", "outbox", ["status", "created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("outbox")
    op.drop_table("live_streams")
    op.drop_table("notifications")
    op.drop_table("follows")
    op.drop_table("comments")
    op.drop_table("loop_interactions")
    op.drop_table("loop_stats")
    op.drop_table("loops")
    op.drop_table("circle_members")
    op.drop_table("circles")
    op.drop_table("profiles")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS outbox_status")
    op.execute("DROP TYPE IF EXISTS interaction_type")
    op.execute("DROP TYPE IF EXISTS loop_visibility")
    op.execute("DROP TYPE IF EXISTS circle_role")
