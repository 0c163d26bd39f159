"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from stance.config import Settings
from stance.domain.model import Comment, Content, Reply
from stance.domain.value import (
    CommentId,
    ContentId,
    ContentStatus,
    DiscussionStatus,
    ReplyId,
    Stance,
    VideoRef,
    VisitorIdentity,
)
from stance.util.jwt import create_admin_token

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def make_content(
    status: ContentStatus = ContentStatus.PUBLISHED,
    title: str = "Should cities ban cars downtown?",
    video_url: str = VIDEO_URL,
    created_at: datetime | None = None,
) -> Content:
    """Build a content item ready to be saved in a repository."""
    video = VideoRef.from_url(video_url)
    now = created_at or datetime.now()
    return Content(
        id=ContentId(uuid4()),
        title=title,
        description="A short debate clip",
        video_url=video.url,
        video_id=video.video_id,
        thumbnail_url=video.thumbnail_url,
        is_shorts=video.is_shorts,
        status=status,
        views=0,
        created_at=now,
        updated_at=now,
    )


def make_comment(
    content_id: ContentId,
    identity: str = "10.0.0.1",
    stance: Stance = Stance.AGREE,
    status: DiscussionStatus = DiscussionStatus.ACTIVE,
    minutes_ago: int = 0,
) -> Comment:
    """Build a comment with a controllable timestamp."""
    created = datetime.now() - timedelta(minutes=minutes_ago)
    return Comment(
        id=CommentId(uuid4()),
        content_id=content_id,
        identity=VisitorIdentity(identity),
        author_name="Alice",
        body="This is a valid ten-char comment",
        stance=stance,
        status=status,
        created_at=created,
        updated_at=created,
    )


def make_reply(
    comment_id: CommentId,
    identity: str = "10.0.0.2",
    stance: Stance = Stance.DISAGREE,
    status: DiscussionStatus = DiscussionStatus.ACTIVE,
    minutes_ago: int = 0,
) -> Reply:
    """Build a reply with a controllable timestamp."""
    created = datetime.now() - timedelta(minutes=minutes_ago)
    return Reply(
        id=ReplyId(uuid4()),
        comment_id=comment_id,
        identity=VisitorIdentity(identity),
        author_name="Bob",
        body="Not so sure",
        stance=stance,
        status=status,
        created_at=created,
        updated_at=created,
    )


def admin_headers() -> dict[str, str]:
    """Authorization header carrying a valid admin token for the test settings."""
    token = create_admin_token("tests", Settings().admin)
    return {"Authorization": f"Bearer {token}"}
