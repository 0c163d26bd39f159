"""Create comment use case."""

from typing import Optional
from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.application.usecase.views import CommentView
from stance.domain.service import CommentService
from stance.domain.value import ContentId, Stance, VisitorIdentity


class CreateCommentRequest(CamelModel):
    """Create comment request."""

    content_id: UUID
    identity: str
    author_name: str
    content: str
    user_vote: Optional[Stance] = None  # Client's claim, checked against the ledger


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    success: bool = True
    comment: CommentView


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a comment on a content item."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment with zero likes and replies

        Raises:
            ValidationError: If the name or text length is out of range
            NotFoundError: If the content is missing or not published
            ForbiddenError: If the caller has not voted on the content
        """
        comment = await self.comment_service.create_comment(
            content_id=ContentId(request.content_id),
            identity=VisitorIdentity(request.identity),
            author_name=request.author_name,
            body=request.content,
            stance=request.user_vote,
        )
        return CreateCommentResponse(comment=CommentView.from_comment(comment))
