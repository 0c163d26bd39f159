"""Comment entity."""

from datetime import datetime

from pydantic import Field

from stance.domain.model.common import DomainModel
from stance.domain.value import (
    CommentId,
    ContentId,
    DiscussionStatus,
    Stance,
    VisitorIdentity,
)


class Comment(DomainModel):
    """Comment entity.

    Top-level discussion item on a content. ``stance`` is a snapshot of the
    author's vote at posting time; later re-votes do not change it.
    ``author_name`` is free display text and carries no identity.
    """

    id: CommentId
    content_id: ContentId
    identity: VisitorIdentity
    author_name: str = Field(min_length=1, max_length=20)
    body: str = Field(min_length=1, max_length=500)
    stance: Stance
    status: DiscussionStatus = DiscussionStatus.ACTIVE
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_active(self) -> bool:
        """Whether the comment is publicly visible."""
        return self.status == DiscussionStatus.ACTIVE
