"""Response fragments shared by several use cases."""

from datetime import datetime

from stance.domain.model.comment import Comment
from stance.domain.model.reply import Reply
from stance.domain.service import CommentThread
from stance.domain.value import Stance, Tally

from .base import CamelModel


class TallyView(CamelModel):
    """Vote tally as sent to the client."""

    agree: int
    disagree: int
    total: int
    agree_percentage: int

    @classmethod
    def from_tally(cls, tally: Tally) -> "TallyView":
        return cls(
            agree=tally.agree,
            disagree=tally.disagree,
            total=tally.total,
            agree_percentage=tally.agree_percentage,
        )


class ReplyView(CamelModel):
    """Public view of a reply."""

    id: str
    author_name: str
    content: str
    user_vote: Stance
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_reply(cls, reply: Reply) -> "ReplyView":
        return cls(
            id=str(reply.id),
            author_name=reply.author_name,
            content=reply.body,
            user_vote=reply.stance,
            created_at=reply.created_at,
            updated_at=reply.updated_at,
        )


class CommentView(CamelModel):
    """Public view of a comment with its replies and counters."""

    id: str
    author_name: str
    content: str
    user_vote: Stance
    likes_count: int
    replies_count: int
    created_at: datetime
    updated_at: datetime
    replies: list[ReplyView]

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        """View of a freshly created comment (no likes, no replies)."""
        return cls(
            id=str(comment.id),
            author_name=comment.author_name,
            content=comment.body,
            user_vote=comment.stance,
            likes_count=0,
            replies_count=0,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=[],
        )

    @classmethod
    def from_thread(cls, thread: CommentThread) -> "CommentView":
        comment = thread.comment
        return cls(
            id=str(comment.id),
            author_name=comment.author_name,
            content=comment.body,
            user_vote=comment.stance,
            likes_count=thread.likes_count,
            replies_count=thread.replies_count,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=[ReplyView.from_reply(reply) for reply in thread.replies],
        )
