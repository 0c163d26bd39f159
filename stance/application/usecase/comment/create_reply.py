"""Create reply use case."""

from typing import Optional
from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.application.usecase.views import ReplyView
from stance.domain.service import CommentService
from stance.domain.value import CommentId, Stance, VisitorIdentity


class CreateReplyRequest(CamelModel):
    """Create reply request."""

    comment_id: UUID
    identity: str
    author_name: str
    content: str
    user_vote: Optional[Stance] = None


class CreateReplyResponse(CamelModel):
    """Create reply response."""

    success: bool = True
    reply: ReplyView


class CreateReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Execute create reply flow.

        Raises:
            ValidationError: If the name or text length is out of range
            NotFoundError: If the parent comment is missing or not active
            ForbiddenError: If the caller has not voted on the parent's content
        """
        reply = await self.comment_service.create_reply(
            comment_id=CommentId(request.comment_id),
            identity=VisitorIdentity(request.identity),
            author_name=request.author_name,
            body=request.content,
            stance=request.user_vote,
        )
        return CreateReplyResponse(reply=ReplyView.from_reply(reply))
