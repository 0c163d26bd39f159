"""Delete discussion item use case."""

from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.domain.service import ModerationService
from stance.domain.value import DiscussionKind


class DeleteDiscussionItemRequest(CamelModel):
    """Hard delete request for a comment or reply."""

    item_id: UUID
    type: DiscussionKind = DiscussionKind.COMMENT


class DeleteDiscussionItemResponse(CamelModel):
    """Hard delete response."""

    success: bool = True


class DeleteDiscussionItemUseCase(BaseUseCase):
    """Use case for permanently removing a comment (with replies and likes) or a reply."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(
        self, request: DeleteDiscussionItemRequest
    ) -> DeleteDiscussionItemResponse:
        await self.moderation_service.delete(request.item_id, request.type)
        return DeleteDiscussionItemResponse()
