"""Update discussion status use case."""

from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.domain.service import ModerationService
from stance.domain.value import DiscussionKind, DiscussionStatus


class UpdateDiscussionStatusRequest(CamelModel):
    """Update moderation status request."""

    item_id: UUID
    type: DiscussionKind = DiscussionKind.COMMENT
    status: DiscussionStatus


class UpdateDiscussionStatusResponse(CamelModel):
    """Update moderation status response."""

    success: bool = True
    id: str
    type: DiscussionKind
    status: DiscussionStatus


class UpdateDiscussionStatusUseCase(BaseUseCase):
    """Use case for flagging, restoring or soft deleting a comment or reply."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize update status use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(
        self, request: UpdateDiscussionStatusRequest
    ) -> UpdateDiscussionStatusResponse:
        """Execute update status flow.

        Raises:
            NotFoundError: If the item does not exist
            InvalidStatusTransitionError: If the item is already DELETED
        """
        status = await self.moderation_service.set_status(
            request.item_id, request.type, request.status
        )
        return UpdateDiscussionStatusResponse(
            id=str(request.item_id), type=request.type, status=status
        )
