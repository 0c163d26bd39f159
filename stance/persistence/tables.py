"""SQLAlchemy table definitions for Stance.

Core ``Table`` objects used by the PostgreSQL repositories. They match the
schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

stance_enum = Enum("AGREE", "DISAGREE", name="stance", create_type=False)
content_status_enum = Enum(
    "DRAFT", "PUBLISHED", name="content_status", create_type=False
)
discussion_status_enum = Enum(
    "ACTIVE", "FLAGGED", "DELETED", name="discussion_status", create_type=False
)

# ============================================================================
# CONTENTS TABLE
# ============================================================================
contents_table = Table(
    "contents",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("video_url", Text, nullable=False),
    Column("video_id", String(64), nullable=False),
    Column("thumbnail_url", Text, nullable=True),
    Column("is_shorts", Boolean, nullable=False, server_default="false"),
    Column("status", content_status_enum, nullable=False, server_default="DRAFT"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_contents_status_created", contents_table.c.status, contents_table.c.created_at)

# ============================================================================
# VOTES TABLE (one current stance per content + identity)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "content_id",
        UUID,
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("identity", String(255), nullable=False),
    Column("stance", stance_enum, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("content_id", "identity", name="uq_votes_content_identity"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "content_id",
        UUID,
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("identity", String(255), nullable=False),
    Column("author_name", String(20), nullable=False),
    Column("body", String(500), nullable=False),
    Column("stance", stance_enum, nullable=False),
    Column("status", discussion_status_enum, nullable=False, server_default="ACTIVE"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_content_id", comments_table.c.content_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("identity", String(255), nullable=False),
    Column("author_name", String(20), nullable=False),
    Column("body", String(300), nullable=False),
    Column("stance", stance_enum, nullable=False),
    Column("status", discussion_status_enum, nullable=False, server_default="ACTIVE"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_replies_comment_id", replies_table.c.comment_id)

# ============================================================================
# LIKES TABLE (one like per comment + identity)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("identity", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "identity", name="uq_likes_comment_identity"),
)
