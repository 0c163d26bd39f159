"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stance.domain.model import Comment
from stance.domain.repository import CommentRepository
from stance.domain.value import CommentId, ContentId, DiscussionStatus
from stance.persistence.mappers import comment_to_dict, row_to_comment
from stance.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_content(
        self,
        content_id: ContentId,
        active_only: bool = True,
    ) -> List[Comment]:
        """Find comments on a content item, newest first."""
        conditions = [comments_table.c.content_id == content_id]
        if active_only:
            conditions.append(
                comments_table.c.status == DiscussionStatus.ACTIVE.value
            )

        stmt = (
            select(comments_table)
            .where(and_(*conditions))
            .order_by(comments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Comment]:
        """Find every comment, newest first."""
        stmt = select(comments_table).order_by(comments_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            comment_dict.pop("id")
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_status(
        self, comment_id: CommentId, status: DiscussionStatus
    ) -> Optional[Comment]:
        """Set the moderation status."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(status=status.value, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete every comment on a content item."""
        stmt = delete(comments_table).where(comments_table.c.content_id == content_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_content(self, content_id: ContentId) -> int:
        """Count comments on a content item (any status)."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.content_id == content_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
