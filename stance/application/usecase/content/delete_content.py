"""Delete content use case."""

from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.domain.service import ContentService
from stance.domain.value import ContentId


class DeleteContentRequest(CamelModel):
    """Delete content request."""

    content_id: UUID


class DeleteContentResponse(CamelModel):
    """Delete content response with the number of removed rows."""

    success: bool = True
    deleted_replies: int
    deleted_likes: int
    deleted_comments: int
    deleted_votes: int


class DeleteContentUseCase(BaseUseCase):
    """Use case for deleting a content item and all of its discussion."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: DeleteContentRequest) -> DeleteContentResponse:
        """Execute delete content flow.

        Raises:
            NotFoundError: If the content does not exist
        """
        result = await self.content_service.delete_content(
            ContentId(request.content_id)
        )
        return DeleteContentResponse(
            deleted_replies=result.replies,
            deleted_likes=result.likes,
            deleted_comments=result.comments,
            deleted_votes=result.votes,
        )
