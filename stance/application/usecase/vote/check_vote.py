"""Check vote use case."""

from typing import Optional
from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.application.usecase.views import TallyView
from stance.domain.service import VoteService
from stance.domain.value import ContentId, Stance, VisitorIdentity


class CheckVoteRequest(CamelModel):
    """Check vote request."""

    content_id: UUID
    identity: str


class CheckVoteResponse(CamelModel):
    """Check vote response."""

    user_vote: Optional[Stance]
    votes: TallyView


class CheckVoteUseCase(BaseUseCase):
    """Use case for reading the caller's stance and the current tally."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: CheckVoteRequest) -> CheckVoteResponse:
        stance, tally = await self.vote_service.check_vote(
            ContentId(request.content_id), VisitorIdentity(request.identity)
        )
        return CheckVoteResponse(user_vote=stance, votes=TallyView.from_tally(tally))
