"""SQLAlchemy table definitions for Loop.

Repositories build Core statements against these tables.
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
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

MAX_BRANCH_DEPTH = 10

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (id is the auth provider's user id)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(30), nullable=False, unique=True),
    Column("display_name", String(100), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("is_moderator", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# CIRCLES TABLES
# ============================================================================
circles_table = Table(
    "circles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("owner_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

circle_members_table = Table(
    "circle_members",
    metadata,
    Column(
        "circle_id",
        UUID,
        ForeignKey("circles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "role",
        postgresql.ENUM("owner", "member", name="circle_role", create_type=False),
        nullable=False,
        server_default="member",
    ),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("circle_id", "user_id", name="uq_circle_member"),
)

Index("idx_circle_members_user_id", circle_members_table.c.user_id)

# ============================================================================
# LOOPS TABLE (content tree)
# ============================================================================
loops_table = Table(
    "loops",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("author_id", UUID, nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("loops.id", ondelete="CASCADE"), nullable=True
    ),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("content", JSONB, nullable=False),
    Column(
        "circle_id",
        UUID,
        ForeignKey("circles.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "visibility",
        postgresql.ENUM("public", "private", name="loop_visibility", create_type=False),
        nullable=False,
        server_default="public",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        f"depth >= 0 AND depth <= {MAX_BRANCH_DEPTH}", name="check_loop_depth"
    ),
    CheckConstraint(
        "(parent_id IS NULL) = (depth = 0)", name="check_loop_root_depth"
    ),
)

Index("idx_loops_parent_id", loops_table.c.parent_id, loops_table.c.created_at)
Index("idx_loops_author_created", loops_table.c.author_id, loops_table.c.created_at)
Index(
    "idx_loops_public_roots",
    loops_table.c.created_at,
    postgresql_where=(loops_table.c.parent_id.is_(None))
    & (loops_table.c.visibility == "public"),
)

# ============================================================================
# LOOP STATS TABLE (denormalized counters)
# ============================================================================
loop_stats_table = Table(
    "loop_stats",
    metadata,
    Column(
        "loop_id",
        UUID,
        ForeignKey("loops.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("branches", Integer, nullable=False, server_default="0"),
    Column("comments", Integer, nullable=False, server_default="0"),
    Column("saves", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("shares", Integer, nullable=False, server_default="0"),
    CheckConstraint(
        "likes >= 0 AND branches >= 0 AND comments >= 0 "
        "AND saves >= 0 AND views >= 0 AND shares >= 0",
        name="check_loop_stats_non_negative",
    ),
)

# ============================================================================
# LOOP INTERACTIONS TABLE
# ============================================================================
loop_interactions_table = Table(
    "loop_interactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "loop_id", UUID, ForeignKey("loops.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "interaction_type",
        postgresql.ENUM(
            "like", "save", "share", "view", name="interaction_type", create_type=False
        ),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id", "loop_id", "interaction_type", name="uq_user_loop_interaction"
    ),
)

Index(
    "idx_loop_interactions_loop_created",
    loop_interactions_table.c.loop_id,
    loop_interactions_table.c.created_at,
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "loop_id", UUID, ForeignKey("loops.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", UUID, nullable=False),
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(text) > 0", name="check_comment_text_not_empty"),
)

Index("idx_comments_loop_created", comments_table.c.loop_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("follower_id", UUID, nullable=False),
    Column("following_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("follower_id", "following_id", name="uq_follow"),
    CheckConstraint("follower_id <> following_id", name="check_no_self_follow"),
)

Index("idx_follows_following_id", follows_table.c.following_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("recipient_id", UUID, nullable=False),
    Column("type", String(50), nullable=False),
    Column("title", String(200), nullable=False),
    Column("message", String(500), nullable=False),
    Column("data", JSONB, nullable=False, server_default="{}"),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at,
)

# ============================================================================
# LIVE STREAMS TABLE
# ============================================================================
live_streams_table = Table(
    "live_streams",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("streamer_id", UUID, nullable=False),
    Column("title", String(200), nullable=False),
    Column("category", String(50), nullable=True),
    Column("is_live", Boolean, nullable=False, server_default="false"),
    Column("started_at", TIMESTAMP(timezone=True), nullable=True),
    Column("ended_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_live_streams_streamer_id", live_streams_table.c.streamer_id)

# ============================================================================
# OUTBOX TABLE (failed side effects kept for replay)
# ============================================================================
outbox_table = Table(
    "outbox",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("kind", String(50), nullable=False),
    Column("payload", JSONB, nullable=False),
    Column(
        "status",
        postgresql.ENUM(
            "pending", "failed", "done", name="outbox_status", create_type=False
        ),
        nullable=False,
        server_default="failed",
    ),
    Column("attempts", Integer, nullable=False, server_default="0"),
    Column("last_error", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("processed_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_outbox_status_created", outbox_table.c.status, outbox_table.c.created_at)

# ============================================================================
# CONTENT FLAGS TABLE (user reports awaiting moderation)
# ============================================================================
content_flags_table = Table(
    "content_flags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("target_type", String(20), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("reporter_id", UUID, nullable=False),
    Column("reason", String(30), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "status",
        postgresql.ENUM(
            "pending", "resolved", "dismissed", name="flag_status", create_type=False
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("moderator_id", UUID, nullable=True),
    Column("moderator_notes", Text, nullable=True),
    Column("action_taken", String(100), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_content_flags_status_created",
    content_flags_table.c.status,
    content_flags_table.c.created_at,
)
Index(
    "idx_content_flags_target",
    content_flags_table.c.target_type,
    content_flags_table.c.target_id,
)
