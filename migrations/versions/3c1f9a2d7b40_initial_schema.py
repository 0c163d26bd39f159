"""initial_schema

Create the schema for Stance:
- Contents (embedded videos, DRAFT/PUBLISHED)
- Votes (one current stance per content + identity)
- Comments and Replies (vote-gated discussion, moderation status)
- Likes (one per comment + identity)

Revision ID: 3c1f9a2d7b40
Revises:
Create Date: 2026-10-19 10:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    for name, values in (
        ("stance", "'AGREE', 'DISAGREE'"),
        ("content_status", "'DRAFT', 'PUBLISHED'"),
        ("discussion_status", "'ACTIVE', 'FLAGGED', 'DELETED'"),
    ):
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({values});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    stance = postgresql.ENUM(name="stance", create_type=False)
    discussion_status = postgresql.ENUM(name="discussion_status", create_type=False)

    # ========================================================================
    # CONTENTS
    # ========================================================================
    op.create_table(
        "contents",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("video_id", sa.String(64), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column(
            "is_shorts", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "status",
            postgresql.ENUM(name="content_status", create_type=False),
            server_default="DRAFT",
            nullable=False,
        ),
        sa.Column("views", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="ck_contents_views_non_negative"),
    )
    op.create_index(
        "idx_contents_status_created", "contents", ["status", "created_at"]
    )

    # ========================================================================
    # VOTES
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("identity", sa.String(255), nullable=False),
        sa.Column("stance", stance, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "content_id", "identity", name="uq_votes_content_identity"
        ),
    )

    # ========================================================================
    # COMMENTS
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("identity", sa.String(255), nullable=False),
        sa.Column("author_name", sa.String(20), nullable=False),
        sa.Column("body", sa.String(500), nullable=False),
        sa.Column("stance", stance, nullable=False),
        sa.Column(
            "status", discussion_status, server_default="ACTIVE", nullable=False
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_comments_content_id", "comments", ["content_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # REPLIES
    # ========================================================================
    op.create_table(
        "replies",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("identity", sa.String(255), nullable=False),
        sa.Column("author_name", sa.String(20), nullable=False),
        sa.Column("body", sa.String(300), nullable=False),
        sa.Column("stance", stance, nullable=False),
        sa.Column(
            "status", discussion_status, server_default="ACTIVE", nullable=False
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_replies_comment_id", "replies", ["comment_id"])

    # ========================================================================
    # LIKES
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("identity", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "comment_id", "identity", name="uq_likes_comment_identity"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("likes")
    op.drop_table("replies")
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_content_id", table_name="comments")
    op.drop_table("comments")
    op.drop_table("votes")
    op.drop_index("idx_contents_status_created", table_name="contents")
    op.drop_table("contents")

    op.execute("DROP TYPE IF EXISTS discussion_status")
    op.execute("DROP TYPE IF EXISTS content_status")
    op.execute("DROP TYPE IF EXISTS stance")
