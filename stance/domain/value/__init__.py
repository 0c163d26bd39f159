"""Domain value objects for Stance."""

from stance.domain.value.identifiers import (
    CommentId,
    ContentId,
    LikeId,
    ReplyId,
    VoteId,
)
from stance.domain.value.types import (
    ContentStatus,
    DiscussionKind,
    DiscussionStatus,
    Stance,
    Tally,
    VideoRef,
    VisitorIdentity,
)

__all__ = [
    # Identifiers
    "ContentId",
    "VoteId",
    "CommentId",
    "ReplyId",
    "LikeId",
    # Types
    "Stance",
    "ContentStatus",
    "DiscussionStatus",
    "DiscussionKind",
    "VisitorIdentity",
    "Tally",
    "VideoRef",
]
