"""List contents use case."""

from datetime import datetime
from typing import Optional

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.application.usecase.views import TallyView
from stance.domain.service import ContentService, VoteService


class ListContentsRequest(CamelModel):
    """List contents request."""

    published_only: bool = True


class ContentSummary(CamelModel):
    """Content card shown in the public listing."""

    id: str
    title: str
    description: Optional[str]
    video_id: str
    thumbnail_url: Optional[str]
    is_shorts: bool
    views: int
    votes: TallyView
    comments: int  # Comments plus replies
    created_at: datetime
    updated_at: datetime


class ListContentsResponse(CamelModel):
    """List contents response."""

    contents: list[ContentSummary]


class ListContentsUseCase(BaseUseCase):
    """Use case for the public content listing."""

    def __init__(
        self, content_service: ContentService, vote_service: VoteService
    ) -> None:
        """Initialize list contents use case.

        Args:
            content_service: Content domain service
            vote_service: Vote domain service (tallies)
        """
        self.content_service = content_service
        self.vote_service = vote_service

    async def execute(self, request: ListContentsRequest) -> ListContentsResponse:
        """Execute list contents flow.

        Args:
            request: List contents request

        Returns:
            Content summaries, newest first
        """
        contents = await self.content_service.list_contents(
            published_only=request.published_only
        )

        summaries = []
        for content in contents:
            tally = await self.vote_service.get_tally(content.id)
            discussion = await self.content_service.count_discussion(content.id)
            summaries.append(
                ContentSummary(
                    id=str(content.id),
                    title=content.title,
                    description=content.description,
                    video_id=content.video_id,
                    thumbnail_url=content.thumbnail_url,
                    is_shorts=content.is_shorts,
                    views=content.views,
                    votes=TallyView.from_tally(tally),
                    comments=discussion,
                    created_at=content.created_at,
                    updated_at=content.updated_at,
                )
            )

        return ListContentsResponse(contents=summaries)
