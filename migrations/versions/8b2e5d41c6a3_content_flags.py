"""content_flags

Add user reports on loops, comments and users, reviewed by moderators.

Revision ID: 8b2e5d41c6a3
Revises: 3f1c2a9d7b10
Create Date: 2026-10-18 15:40:07.552910

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8b2e5d41c6a3"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE flag_status AS ENUM ('pending', 'resolved', 'dismissed');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "content_flags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("target_type", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.String(30), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending", "resolved", "dismissed", name="flag_status", create_type=False
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("moderator_id", sa.UUID(), nullable=True),
        sa.Column("moderator_notes", sa.Text(), nullable=True),
        sa.Column("action_taken", sa.String(100), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "target_type IN ('loop', 'comment', 'user')", name="ck_flag_target_type"
        ),
    )
    op.create_index(
        "idx_content_flags_status_created", "content_flags", ["status", "created_at"]
    )
    op.create_index(
        "idx_content_flags_target", "content_flags", ["target_type", "target_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("content_flags")
    op.execute("DROP TYPE IF EXISTS flag_status")
