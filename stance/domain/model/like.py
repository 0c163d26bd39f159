"""Like entity."""

from datetime import datetime

from pydantic import Field

from stance.domain.model.common import DomainModel
from stance.domain.value import CommentId, LikeId, VisitorIdentity


class Like(DomainModel):
    """One visitor's endorsement of one comment.

    At most one like per (comment, identity), enforced by a unique constraint.
    """

    id: LikeId
    comment_id: CommentId
    identity: VisitorIdentity
    created_at: datetime = Field(default_factory=datetime.now)
