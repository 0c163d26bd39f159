"""Domain model entities for Stance."""

from stance.domain.model.comment import Comment
from stance.domain.model.content import Content
from stance.domain.model.like import Like
from stance.domain.model.reply import Reply
from stance.domain.model.vote import Vote

__all__ = [
    "Content",
    "Vote",
    "Comment",
    "Reply",
    "Like",
]
