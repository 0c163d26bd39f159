"""Get content detail use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.application.usecase.views import CommentView, TallyView
from stance.domain.service import CommentService, ContentService, VoteService
from stance.domain.value import ContentId


class GetContentRequest(CamelModel):
    """Get content request."""

    content_id: UUID


class GetContentResponse(CamelModel):
    """Content page: video, tally and visible discussion."""

    id: str
    title: str
    description: Optional[str]
    video_url: str
    video_id: str
    thumbnail_url: Optional[str]
    is_shorts: bool
    views: int
    votes: TallyView
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime


class GetContentUseCase(BaseUseCase):
    """Use case for the public content page."""

    def __init__(
        self,
        content_service: ContentService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get content use case.

        Args:
            content_service: Content domain service
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.content_service = content_service
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: GetContentRequest) -> GetContentResponse:
        """Execute get content flow.

        Steps:
        1. Count the view (published content only)
        2. Recompute the tally
        3. Load active comments with active replies and like counts

        Raises:
            NotFoundError: If the content is missing or not published
        """
        content_id = ContentId(request.content_id)
        content = await self.content_service.record_view(content_id)
        tally = await self.vote_service.get_tally(content_id)
        threads = await self.comment_service.list_discussion(content_id)

        return GetContentResponse(
            id=str(content.id),
            title=content.title,
            description=content.description,
            video_url=content.video_url,
            video_id=content.video_id,
            thumbnail_url=content.thumbnail_url,
            is_shorts=content.is_shorts,
            views=content.views,
            votes=TallyView.from_tally(tally),
            comments=[CommentView.from_thread(thread) for thread in threads],
            created_at=content.created_at,
            updated_at=content.updated_at,
        )
