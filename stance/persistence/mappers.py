"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from stance.domain.model import Comment, Content, Like, Reply, Vote
from stance.domain.value import (
    CommentId,
    ContentId,
    ContentStatus,
    DiscussionStatus,
    LikeId,
    ReplyId,
    Stance,
    VisitorIdentity,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_content(row: Dict[str, Any]) -> Content:
    """Convert database row to Content domain model.

    Args:
        row: Database row as dict

    Returns:
        Content domain model
    """
    return Content(
        id=ContentId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        video_url=row["video_url"],
        video_id=row["video_id"],
        thumbnail_url=row.get("thumbnail_url"),
        is_shorts=row["is_shorts"],
        status=ContentStatus(row["status"]),
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def content_to_dict(content: Content) -> Dict[str, Any]:
    """Convert Content domain model to database dict."""
    data = content.model_dump()
    data["status"] = content.status.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        identity=VisitorIdentity(row["identity"]),
        stance=Stance(row["stance"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    The identity value object is flattened to its string.
    """
    data = vote.model_dump()
    data["identity"] = vote.identity.root
    data["stance"] = vote.stance.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        identity=VisitorIdentity(row["identity"]),
        author_name=row["author_name"],
        body=row["body"],
        stance=Stance(row["stance"]),
        status=DiscussionStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["identity"] = comment.identity.root
    data["stance"] = comment.stance.value
    data["status"] = comment.status.value
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        identity=VisitorIdentity(row["identity"]),
        author_name=row["author_name"],
        body=row["body"],
        stance=Stance(row["stance"]),
        status=DiscussionStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict."""
    data = reply.model_dump()
    data["identity"] = reply.identity.root
    data["stance"] = reply.stance.value
    data["status"] = reply.status.value
    return data


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        identity=VisitorIdentity(row["identity"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    data = like.model_dump()
    data["identity"] = like.identity.root
    return data
