"""Cast vote use case."""

from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.application.usecase.views import TallyView
from stance.domain.service import VoteService
from stance.domain.value import ContentId, Stance, VisitorIdentity


class CastVoteRequest(CamelModel):
    """Cast vote request."""

    content_id: UUID
    vote_type: Stance
    identity: str  # Resolved by the transport layer


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    success: bool = True
    user_vote: Stance
    votes: TallyView


class CastVoteUseCase(BaseUseCase):
    """Use case for casting or changing a vote on a content item."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The stored stance and the updated tally

        Raises:
            NotFoundError: If the content is missing or not published
        """
        stance, tally = await self.vote_service.cast_vote(
            ContentId(request.content_id),
            VisitorIdentity(request.identity),
            request.vote_type,
        )
        return CastVoteResponse(user_vote=stance, votes=TallyView.from_tally(tally))
