"""In-memory content repository for testing."""

from typing import Optional, Sequence

from stance.domain.model.content import Content
from stance.domain.repository.content import ContentRepository
from stance.domain.value import ContentId, ContentStatus

from .base import InMemoryTable


class InMemoryContentRepository(InMemoryTable[Content], ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID."""
        return self._rows.get(content_id)

    async def find_by_ids(self, content_ids: Sequence[ContentId]) -> list[Content]:
        """Find several content items."""
        return [self._rows[cid] for cid in content_ids if cid in self._rows]

    async def find_all(self, status: Optional[ContentStatus] = None) -> list[Content]:
        """Find content items, newest first."""
        contents = [
            c for c in self._rows.values() if status is None or c.status == status
        ]
        return self._newest_first(contents)

    async def save(self, content: Content) -> Content:
        """Save a content item (create or update)."""
        existing = self._rows.get(content.id)
        if existing:
            # Views only move through increment_views
            content = content.model_copy(
                update={"views": existing.views, "created_at": existing.created_at}
            )
        self._rows[content.id] = content
        return content

    async def increment_views(self, content_id: ContentId) -> Optional[Content]:
        """Increment the view counter."""
        content = self._rows.get(content_id)
        if not content:
            return None
        updated = content.model_copy(update={"views": content.views + 1})
        self._rows[content_id] = updated
        return updated

    async def delete(self, content_id: ContentId) -> bool:
        """Delete the content row."""
        return self._rows.pop(content_id, None) is not None
