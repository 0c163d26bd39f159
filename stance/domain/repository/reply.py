"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from stance.domain.model.reply import Reply
from stance.domain.value import CommentId, DiscussionStatus, ReplyId


class ReplyRepository(ABC):
    """Repository for Reply entity."""

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID (any status)."""
        pass

    @abstractmethod
    async def find_by_comments(
        self,
        comment_ids: Sequence[CommentId],
        active_only: bool = True,
    ) -> List[Reply]:
        """Find replies of several comments, oldest first (batch query).

        Args:
            comment_ids: Parent comment IDs
            active_only: Only return ACTIVE replies

        Returns:
            List of replies
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Reply]:
        """Find every reply (any status), newest first."""
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        pass

    @abstractmethod
    async def update_status(
        self, reply_id: ReplyId, status: DiscussionStatus
    ) -> Optional[Reply]:
        """Set the moderation status.

        Returns:
            The updated reply, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, reply_id: ReplyId) -> bool:
        """Hard delete a reply.

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete all replies of the given comments.

        Returns:
            Number of deleted replies
        """
        pass

    @abstractmethod
    async def count_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Count replies (any status) of the given comments."""
        pass
