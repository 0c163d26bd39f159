"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from stance.domain.error import ConflictError
from stance.domain.model.vote import Vote
from stance.domain.repository.vote import VoteRepository
from stance.domain.value import ContentId, Stance, VisitorIdentity

from .base import InMemoryTable


class InMemoryVoteRepository(InMemoryTable[Vote], VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    async def find_by_content_and_identity(
        self, content_id: ContentId, identity: VisitorIdentity
    ) -> Optional[Vote]:
        """Find a vote by content and identity."""
        for vote in self._rows.values():
            if vote.content_id == content_id and vote.identity == identity:
                return vote
        return None

    async def find_by_content(self, content_id: ContentId) -> list[Vote]:
        """Find all votes on a content item."""
        return [v for v in self._rows.values() if v.content_id == content_id]

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            ConflictError: If the identity already voted on the content
        """
        if await self.find_by_content_and_identity(vote.content_id, vote.identity):
            raise ConflictError("Vote", f"{vote.content_id}:{vote.identity}")

        self._rows[vote.id] = vote
        return vote

    async def update_stance(
        self, content_id: ContentId, identity: VisitorIdentity, stance: Stance
    ) -> Optional[Vote]:
        """Overwrite the stance of an existing vote."""
        vote = await self.find_by_content_and_identity(content_id, identity)
        if not vote:
            return None
        updated = vote.model_copy(update={"stance": stance, "updated_at": datetime.now()})
        self._rows[vote.id] = updated
        return updated

    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete all votes on a content item."""
        doomed = [v.id for v in self._rows.values() if v.content_id == content_id]
        for vote_id in doomed:
            del self._rows[vote_id]
        return len(doomed)
