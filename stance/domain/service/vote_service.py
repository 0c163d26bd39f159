"""Vote domain service (the vote ledger)."""

from datetime import datetime
from uuid import uuid4

import logfire

from stance.domain.error import ConflictError, ForbiddenError
from stance.domain.model.vote import Vote
from stance.domain.repository import VoteRepository
from stance.domain.value import ContentId, Stance, Tally, VisitorIdentity, VoteId

from .base import Service
from .content_service import ContentService


class VoteService(Service):
    """Domain service for vote operations.

    Tallies are recomputed from the current votes on every call; there is no
    counter cache, so a tally always reflects the latest committed write.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        content_service: ContentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            content_service: Content domain service
        """
        self.vote_repository = vote_repository
        self.content_service = content_service

    async def get_vote(
        self, content_id: ContentId, identity: VisitorIdentity
    ) -> Stance | None:
        """Get an identity's current stance on a content item.

        Args:
            content_id: Content ID
            identity: Visitor identity

        Returns:
            The stance, or None if the identity has not voted
        """
        vote = await self.vote_repository.find_by_content_and_identity(
            content_id, identity
        )
        return vote.stance if vote else None

    async def require_vote(
        self, content_id: ContentId, identity: VisitorIdentity
    ) -> Vote:
        """Get the identity's vote or reject the caller.

        This is the gate in front of comment and reply creation.

        Raises:
            ForbiddenError: If the identity holds no vote on the content
        """
        vote = await self.vote_repository.find_by_content_and_identity(
            content_id, identity
        )
        if not vote:
            logfire.warn(
                "Discussion attempt without vote",
                content_id=str(content_id),
                identity=str(identity),
            )
            raise ForbiddenError("vote required")
        return vote

    async def get_tally(self, content_id: ContentId) -> Tally:
        """Aggregate the current votes on a content item.

        Args:
            content_id: Content ID

        Returns:
            Tally (all zeros when nobody voted)
        """
        votes = await self.vote_repository.find_by_content(content_id)
        return Tally.from_stances(vote.stance for vote in votes)

    async def check_vote(
        self, content_id: ContentId, identity: VisitorIdentity
    ) -> tuple[Stance | None, Tally]:
        """Get the identity's stance together with the tally.

        Unknown content simply yields no stance and an empty tally.
        """
        with logfire.span(
            "vote_service.check_vote",
            content_id=str(content_id),
            identity=str(identity),
        ):
            stance = await self.get_vote(content_id, identity)
            tally = await self.get_tally(content_id)
            return stance, tally

    async def cast_vote(
        self, content_id: ContentId, identity: VisitorIdentity, stance: Stance
    ) -> tuple[Stance, Tally]:
        """Record an identity's stance on a published content item.

        Creates the vote on first call; later calls overwrite the stance
        unconditionally. A concurrent insert for the same pair loses on the
        unique constraint and falls back to the overwrite.

        Args:
            content_id: Content ID
            identity: Visitor identity
            stance: AGREE or DISAGREE

        Returns:
            The stored stance and the recomputed tally

        Raises:
            NotFoundError: If the content is missing or not published
        """
        with logfire.span(
            "vote_service.cast_vote",
            content_id=str(content_id),
            identity=str(identity),
            stance=stance.value,
        ):
            await self.content_service.get_published_content(content_id)

            existing = await self.vote_repository.find_by_content_and_identity(
                content_id, identity
            )
            if existing:
                vote = await self._overwrite(content_id, identity, stance)
            else:
                now = datetime.now()
                try:
                    vote = await self.vote_repository.create(
                        Vote(
                            id=VoteId(uuid4()),
                            content_id=content_id,
                            identity=identity,
                            stance=stance,
                            created_at=now,
                            updated_at=now,
                        )
                    )
                    logfire.info("Vote created", content_id=str(content_id))
                except ConflictError:
                    logfire.warn(
                        "Concurrent duplicate vote, overwriting",
                        content_id=str(content_id),
                        identity=str(identity),
                    )
                    vote = await self._overwrite(content_id, identity, stance)

            tally = await self.get_tally(content_id)
            logfire.info(
                "Vote cast",
                content_id=str(content_id),
                stance=vote.stance.value,
                total=tally.total,
            )
            return vote.stance, tally

    async def _overwrite(
        self, content_id: ContentId, identity: VisitorIdentity, stance: Stance
    ) -> Vote:
        vote = await self.vote_repository.update_stance(content_id, identity, stance)
        if vote is None:
            # Only possible if the row vanished between the two statements,
            # i.e. the content is being deleted right now.
            raise ConflictError("Vote", f"{content_id}:{identity}")
        return vote
