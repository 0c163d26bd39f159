"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from stance.domain.model.content import Content
from stance.domain.value import ContentId, ContentStatus


class ContentRepository(ABC):
    """Repository for Content aggregate.

    Defines the contract for content persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID (any status).

        Args:
            content_id: The content's unique identifier

        Returns:
            The content if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, content_ids: Sequence[ContentId]) -> List[Content]:
        """Find several content items at once (batch query).

        Args:
            content_ids: IDs to look up

        Returns:
            Content items that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(self, status: Optional[ContentStatus] = None) -> List[Content]:
        """Find content items, newest first.

        Args:
            status: Only return items with this status (None for all)

        Returns:
            List of content items
        """
        pass

    @abstractmethod
    async def save(self, content: Content) -> Content:
        """Save a content item (create or update).

        Args:
            content: The content to save

        Returns:
            The saved content
        """
        pass

    @abstractmethod
    async def increment_views(self, content_id: ContentId) -> Optional[Content]:
        """Atomically increment the view counter.

        Args:
            content_id: The content ID

        Returns:
            The updated content, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, content_id: ContentId) -> bool:
        """Delete the content row itself.

        Dependent rows must be removed first (see ContentService.delete_content).

        Args:
            content_id: The content ID

        Returns:
            True if a row was deleted
        """
        pass
