"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stance.domain.model import Vote
from stance.domain.repository import VoteRepository
from stance.domain.value import ContentId, Stance, VisitorIdentity
from stance.persistence.mappers import row_to_vote, vote_to_dict
from stance.persistence.repository.common import insert_unique
from stance.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Uniqueness of (content_id, identity) is enforced by the
    ``uq_votes_content_identity`` constraint.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_content_and_identity(
        self, content_id: ContentId, identity: VisitorIdentity
    ) -> Optional[Vote]:
        """Find the current vote of one identity on one content."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.content_id == content_id,
                votes_table.c.identity == identity.root,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_content(self, content_id: ContentId) -> List[Vote]:
        """Find all votes on a content item."""
        stmt = select(votes_table).where(votes_table.c.content_id == content_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def create(self, vote: Vote) -> Vote:
        """Insert a new vote (ConflictError on duplicate)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await insert_unique(
            self.session,
            stmt,
            constraint="uq_votes_content_identity",
            resource="Vote",
            identifier=f"{vote.content_id}:{vote.identity}",
        )
        return vote

    async def update_stance(
        self, content_id: ContentId, identity: VisitorIdentity, stance: Stance
    ) -> Optional[Vote]:
        """Overwrite the stance unconditionally."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.content_id == content_id,
                    votes_table.c.identity == identity.root,
                )
            )
            .values(stance=stance.value, updated_at=datetime.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete every vote on a content item."""
        stmt = delete(votes_table).where(votes_table.c.content_id == content_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
