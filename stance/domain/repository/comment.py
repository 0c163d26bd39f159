"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stance.domain.model.comment import Comment
from stance.domain.value import CommentId, ContentId, DiscussionStatus


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID (any status).

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_content(
        self,
        content_id: ContentId,
        active_only: bool = True,
    ) -> List[Comment]:
        """Find comments on a content item, newest first.

        Args:
            content_id: The content ID
            active_only: Only return ACTIVE comments

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Find every comment (any status), newest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: DiscussionStatus
    ) -> Optional[Comment]:
        """Set the moderation status.

        Args:
            comment_id: The comment ID
            status: New status

        Returns:
            The updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a comment.

        Args:
            comment_id: The comment ID

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete every comment on a content item.

        Args:
            content_id: The content ID

        Returns:
            Number of deleted comments
        """
        pass

    @abstractmethod
    async def count_by_content(self, content_id: ContentId) -> int:
        """Count comments on a content item (any status).

        Args:
            content_id: The content ID

        Returns:
            Number of comments
        """
        pass
