"""In-memory reply repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from stance.domain.model.reply import Reply
from stance.domain.repository.reply import ReplyRepository
from stance.domain.value import CommentId, DiscussionStatus, ReplyId

from .base import InMemoryTable


class InMemoryReplyRepository(InMemoryTable[Reply], ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        return self._rows.get(reply_id)

    async def find_by_comments(
        self,
        comment_ids: Sequence[CommentId],
        active_only: bool = True,
    ) -> list[Reply]:
        """Find replies of several comments, oldest first."""
        wanted = set(comment_ids)
        replies = [
            r
            for r in self._rows.values()
            if r.comment_id in wanted
            and (not active_only or r.status == DiscussionStatus.ACTIVE)
        ]
        return sorted(replies, key=lambda r: r.created_at)

    async def find_all(self) -> list[Reply]:
        return self._newest_first(list(self._rows.values()))

    async def save(self, reply: Reply) -> Reply:
        self._rows[reply.id] = reply
        return reply

    async def update_status(
        self, reply_id: ReplyId, status: DiscussionStatus
    ) -> Optional[Reply]:
        reply = self._rows.get(reply_id)
        if not reply:
            return None
        updated = reply.model_copy(update={"status": status, "updated_at": datetime.now()})
        self._rows[reply_id] = updated
        return updated

    async def delete(self, reply_id: ReplyId) -> bool:
        return self._rows.pop(reply_id, None) is not None

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        wanted = set(comment_ids)
        doomed = [r.id for r in self._rows.values() if r.comment_id in wanted]
        for reply_id in doomed:
            del self._rows[reply_id]
        return len(doomed)

    async def count_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        wanted = set(comment_ids)
        return sum(1 for r in self._rows.values() if r.comment_id in wanted)
