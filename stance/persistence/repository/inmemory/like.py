"""In-memory like repository for testing."""

from typing import Optional, Sequence

from stance.domain.error import ConflictError
from stance.domain.model.like import Like
from stance.domain.repository.like import LikeRepository
from stance.domain.value import CommentId, VisitorIdentity

from .base import InMemoryTable


class InMemoryLikeRepository(InMemoryTable[Like], LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    async def find_by_comment_and_identity(
        self, comment_id: CommentId, identity: VisitorIdentity
    ) -> Optional[Like]:
        for like in self._rows.values():
            if like.comment_id == comment_id and like.identity == identity:
                return like
        return None

    async def create(self, like: Like) -> Like:
        """Insert a like.

        Raises:
            ConflictError: If the identity already likes the comment
        """
        if await self.find_by_comment_and_identity(like.comment_id, like.identity):
            raise ConflictError("Like", f"{like.comment_id}:{like.identity}")

        self._rows[like.id] = like
        return like

    async def delete_by_comment_and_identity(
        self, comment_id: CommentId, identity: VisitorIdentity
    ) -> bool:
        like = await self.find_by_comment_and_identity(comment_id, identity)
        if not like:
            return False
        del self._rows[like.id]
        return True

    async def count_by_comment(self, comment_id: CommentId) -> int:
        return sum(1 for like in self._rows.values() if like.comment_id == comment_id)

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        counts = {comment_id: 0 for comment_id in comment_ids}
        for like in self._rows.values():
            if like.comment_id in counts:
                counts[like.comment_id] += 1
        return counts

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        wanted = set(comment_ids)
        doomed = [like.id for like in self._rows.values() if like.comment_id in wanted]
        for like_id in doomed:
            del self._rows[like_id]
        return len(doomed)
