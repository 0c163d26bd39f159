"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from stance.domain.model.like import Like
from stance.domain.value import CommentId, VisitorIdentity


class LikeRepository(ABC):
    """Repository for Like entity.

    Implementations must enforce uniqueness of (comment_id, identity) with a
    storage-level constraint.
    """

    @abstractmethod
    async def find_by_comment_and_identity(
        self, comment_id: CommentId, identity: VisitorIdentity
    ) -> Optional[Like]:
        """Find one identity's like on one comment.

        Args:
            comment_id: The comment ID
            identity: The visitor identity

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, like: Like) -> Like:
        """Insert a new like.

        Raises:
            ConflictError: If the identity already likes the comment
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_identity(
        self, comment_id: CommentId, identity: VisitorIdentity
    ) -> bool:
        """Remove one identity's like.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes per comment (batch query, avoids N+1).

        Returns:
            Mapping of comment ID to like count (0 for comments without likes)
        """
        pass

    @abstractmethod
    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete all likes of the given comments.

        Returns:
            Number of deleted likes
        """
        pass
