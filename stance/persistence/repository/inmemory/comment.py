"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from stance.domain.model.comment import Comment
from stance.domain.repository.comment import CommentRepository
from stance.domain.value import CommentId, ContentId, DiscussionStatus

from .base import InMemoryTable


class InMemoryCommentRepository(InMemoryTable[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._rows.get(comment_id)

    async def find_by_content(
        self,
        content_id: ContentId,
        active_only: bool = True,
    ) -> list[Comment]:
        """Find comments on a content item, newest first."""
        comments = [
            c
            for c in self._rows.values()
            if c.content_id == content_id and (not active_only or c.is_active)
        ]
        return self._newest_first(comments)

    async def find_all(self) -> list[Comment]:
        """Find every comment, newest first."""
        return self._newest_first(list(self._rows.values()))

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._rows[comment.id] = comment
        return comment

    async def update_status(
        self, comment_id: CommentId, status: DiscussionStatus
    ) -> Optional[Comment]:
        """Set the moderation status."""
        comment = self._rows.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(
            update={"status": status, "updated_at": datetime.now()}
        )
        self._rows[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a comment."""
        return self._rows.pop(comment_id, None) is not None

    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete all comments on a content item."""
        doomed = [c.id for c in self._rows.values() if c.content_id == content_id]
        for comment_id in doomed:
            del self._rows[comment_id]
        return len(doomed)

    async def count_by_content(self, content_id: ContentId) -> int:
        """Count comments on a content item."""
        return sum(1 for c in self._rows.values() if c.content_id == content_id)
