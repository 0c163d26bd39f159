"""Reply entity."""

from datetime import datetime

from pydantic import Field

from stance.domain.model.common import DomainModel
from stance.domain.value import (
    CommentId,
    DiscussionStatus,
    ReplyId,
    Stance,
    VisitorIdentity,
)


class Reply(DomainModel):
    """Reply to a comment.

    Same shape as a comment but attached to its parent comment; the owning
    content is reached through the parent.
    """

    id: ReplyId
    comment_id: CommentId
    identity: VisitorIdentity
    author_name: str = Field(min_length=1, max_length=20)
    body: str = Field(min_length=1, max_length=300)
    stance: Stance
    status: DiscussionStatus = DiscussionStatus.ACTIVE
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
