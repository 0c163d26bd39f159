"""PostgreSQL implementation of Like repository."""

from typing import Dict, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from stance.domain.model import Like
from stance.domain.repository import LikeRepository
from stance.domain.value import CommentId, VisitorIdentity
from stance.persistence.mappers import like_to_dict, row_to_like
from stance.persistence.repository.common import insert_unique
from stance.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Uniqueness of (comment_id, identity) is enforced by the
    ``uq_likes_comment_identity`` constraint.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_comment_and_identity(
        self, comment_id: CommentId, identity: VisitorIdentity
    ) -> Optional[Like]:
        """Find one identity's like on one comment."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.comment_id == comment_id,
                likes_table.c.identity == identity.root,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def create(self, like: Like) -> Like:
        """Insert a new like (ConflictError on duplicate)."""
        stmt = insert(likes_table).values(**like_to_dict(like))
        await insert_unique(
            self.session,
            stmt,
            constraint="uq_likes_comment_identity",
            resource="Like",
            identifier=f"{like.comment_id}:{like.identity}",
        )
        return like

    async def delete_by_comment_and_identity(
        self, comment_id: CommentId, identity: VisitorIdentity
    ) -> bool:
        """Remove one identity's like."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.comment_id == comment_id,
                likes_table.c.identity == identity.root,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes per comment with one grouped query."""
        if not comment_ids:
            return {}

        stmt = (
            select(likes_table.c.comment_id, func.count().label("likes"))
            .where(likes_table.c.comment_id.in_(comment_ids))
            .group_by(likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        counts = {CommentId(row.comment_id): row.likes for row in result.fetchall()}
        return {comment_id: counts.get(comment_id, 0) for comment_id in comment_ids}

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete all likes of the given comments."""
        if not comment_ids:
            return 0

        stmt = delete(likes_table).where(likes_table.c.comment_id.in_(comment_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
