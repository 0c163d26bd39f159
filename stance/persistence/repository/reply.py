"""PostgreSQL implementation of Reply repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stance.domain.model import Reply
from stance.domain.repository import ReplyRepository
from stance.domain.value import CommentId, DiscussionStatus, ReplyId
from stance.persistence.mappers import reply_to_dict, row_to_reply
from stance.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_by_comments(
        self,
        comment_ids: Sequence[CommentId],
        active_only: bool = True,
    ) -> List[Reply]:
        """Find replies of several comments, oldest first."""
        if not comment_ids:
            return []

        conditions = [replies_table.c.comment_id.in_(comment_ids)]
        if active_only:
            conditions.append(replies_table.c.status == DiscussionStatus.ACTIVE.value)

        stmt = (
            select(replies_table)
            .where(and_(*conditions))
            .order_by(replies_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Reply]:
        """Find every reply, newest first."""
        stmt = select(replies_table).order_by(replies_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        reply_dict = reply_to_dict(reply)
        existing = await self.find_by_id(reply.id)

        if existing:
            reply_dict.pop("id")
            stmt = (
                update(replies_table)
                .where(replies_table.c.id == reply.id)
                .values(**reply_dict)
            )
        else:
            stmt = insert(replies_table).values(**reply_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return reply

    async def update_status(
        self, reply_id: ReplyId, status: DiscussionStatus
    ) -> Optional[Reply]:
        """Set the moderation status."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(status=status.value, updated_at=datetime.now())
            .returning(replies_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def delete(self, reply_id: ReplyId) -> bool:
        """Hard delete a reply."""
        stmt = delete(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete all replies of the given comments."""
        if not comment_ids:
            return 0

        stmt = delete(replies_table).where(replies_table.c.comment_id.in_(comment_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Count replies (any status) of the given comments."""
        if not comment_ids:
            return 0

        stmt = (
            select(func.count())
            .select_from(replies_table)
            .where(replies_table.c.comment_id.in_(comment_ids))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
