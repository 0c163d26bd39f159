"""PostgreSQL implementation of Content repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stance.domain.model import Content
from stance.domain.repository import ContentRepository
from stance.domain.value import ContentId, ContentStatus
from stance.persistence.mappers import content_to_dict, row_to_content
from stance.persistence.tables import contents_table


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID."""
        stmt = select(contents_table).where(contents_table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_content(row._asdict()) if row else None

    async def find_by_ids(self, content_ids: Sequence[ContentId]) -> List[Content]:
        """Find several content items (batch query)."""
        if not content_ids:
            return []

        stmt = select(contents_table).where(contents_table.c.id.in_(content_ids))
        result = await self.session.execute(stmt)
        return [row_to_content(row._asdict()) for row in result.fetchall()]

    async def find_all(self, status: Optional[ContentStatus] = None) -> List[Content]:
        """Find content items, newest first."""
        stmt = select(contents_table).order_by(contents_table.c.created_at.desc())
        if status is not None:
            stmt = stmt.where(contents_table.c.status == status.value)
        result = await self.session.execute(stmt)
        return [row_to_content(row._asdict()) for row in result.fetchall()]

    async def save(self, content: Content) -> Content:
        """Save a content item (create or update)."""
        with logfire.span("content_repository.save", content_id=str(content.id)):
            existing = await self.find_by_id(content.id)
            content_dict = content_to_dict(content)

            if existing:
                content_dict.pop("id")
                content_dict.pop("created_at")
                content_dict.pop("views")  # Only changed by increment_views
                stmt = (
                    update(contents_table)
                    .where(contents_table.c.id == content.id)
                    .values(**content_dict)
                    .returning(contents_table)
                )
            else:
                stmt = insert(contents_table).values(**content_dict).returning(
                    contents_table
                )

            result = await self.session.execute(stmt)
            await self.session.flush()
            return row_to_content(result.fetchone()._asdict())

    async def increment_views(self, content_id: ContentId) -> Optional[Content]:
        """Atomically increment the view counter."""
        stmt = (
            update(contents_table)
            .where(contents_table.c.id == content_id)
            .values(views=contents_table.c.views + 1)
            .returning(contents_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_content(row._asdict()) if row else None

    async def delete(self, content_id: ContentId) -> bool:
        """Delete the content row."""
        stmt = delete(contents_table).where(contents_table.c.id == content_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
