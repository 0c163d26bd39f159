"""List moderation items use case."""

from datetime import datetime
from typing import Optional

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.domain.service import ModerationService
from stance.domain.value import DiscussionKind, DiscussionStatus, Stance


class ModerationItemView(CamelModel):
    """One row of the moderation queue."""

    id: str
    type: DiscussionKind
    content_id: str
    content_title: Optional[str]
    parent_id: Optional[str]
    author_name: str
    content: str
    user_vote: Stance
    status: DiscussionStatus
    likes_count: int
    replies_count: int
    created_at: datetime


class ListDiscussionItemsResponse(CamelModel):
    """List moderation items response."""

    items: list[ModerationItemView]


class ListDiscussionItemsUseCase(BaseUseCase):
    """Use case for the admin moderation queue."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: None = None) -> ListDiscussionItemsResponse:
        """Execute list flow: every comment and reply, newest first."""
        items = await self.moderation_service.list_items()
        return ListDiscussionItemsResponse(
            items=[
                ModerationItemView(
                    id=str(item.id),
                    type=item.kind,
                    content_id=str(item.content_id),
                    content_title=item.content_title,
                    parent_id=str(item.parent_id) if item.parent_id else None,
                    author_name=item.author_name,
                    content=item.body,
                    user_vote=item.stance,
                    status=item.status,
                    likes_count=item.likes_count,
                    replies_count=item.replies_count,
                    created_at=item.created_at,
                )
                for item in items
            ]
        )
