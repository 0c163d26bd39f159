"""Admin content use cases: list, get, create, update."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.application.usecase.views import TallyView
from stance.domain.error import NotFoundError
from stance.domain.model.content import Content
from stance.domain.service import ContentService, VoteService
from stance.domain.value import ContentId, ContentStatus


class AdminContentView(CamelModel):
    """Content as shown in the admin console (any status)."""

    id: str
    title: str
    description: Optional[str]
    video_url: str
    video_id: str
    thumbnail_url: Optional[str]
    is_shorts: bool
    status: ContentStatus
    views: int
    votes: TallyView
    comments: int
    created_at: datetime
    updated_at: datetime


class AdminContentListResponse(CamelModel):
    """Admin content list response."""

    contents: list[AdminContentView]


class GetAdminContentRequest(CamelModel):
    """Admin get content request."""

    content_id: UUID


class SaveContentRequest(CamelModel):
    """Create or update content request.

    ``status`` is free text from the admin form; anything other than a known
    status is stored as DRAFT.
    """

    content_id: Optional[UUID] = None  # None creates a new item
    title: str
    description: Optional[str] = None
    video_url: str
    status: Optional[str] = None


def parse_status(value: Optional[str]) -> ContentStatus:
    """Map admin form input to a content status, defaulting to DRAFT."""
    if value:
        try:
            return ContentStatus(value.strip().upper())
        except ValueError:
            logfire.warn("Unknown content status, using DRAFT", status=value)
    return ContentStatus.DRAFT


class _AdminContentUseCase(BaseUseCase):
    def __init__(
        self, content_service: ContentService, vote_service: VoteService
    ) -> None:
        self.content_service = content_service
        self.vote_service = vote_service

    async def _view(self, content: Content) -> AdminContentView:
        tally = await self.vote_service.get_tally(content.id)
        discussion = await self.content_service.count_discussion(content.id)
        return AdminContentView(
            id=str(content.id),
            title=content.title,
            description=content.description,
            video_url=content.video_url,
            video_id=content.video_id,
            thumbnail_url=content.thumbnail_url,
            is_shorts=content.is_shorts,
            status=content.status,
            views=content.views,
            votes=TallyView.from_tally(tally),
            comments=discussion,
            created_at=content.created_at,
            updated_at=content.updated_at,
        )


class ListAdminContentsUseCase(_AdminContentUseCase):
    """Use case for listing every content item, drafts included."""

    async def execute(self, request: None = None) -> AdminContentListResponse:
        contents = await self.content_service.list_contents(published_only=False)
        return AdminContentListResponse(
            contents=[await self._view(content) for content in contents]
        )


class GetAdminContentUseCase(_AdminContentUseCase):
    """Use case for loading one content item in the admin console."""

    async def execute(self, request: GetAdminContentRequest) -> AdminContentView:
        """Execute admin get content flow.

        Raises:
            NotFoundError: If the content does not exist
        """
        content_id = ContentId(request.content_id)
        content = await self.content_service.get_content_by_id(content_id)
        if not content:
            raise NotFoundError("Content", str(content_id))
        return await self._view(content)


class SaveContentUseCase(_AdminContentUseCase):
    """Use case for creating or updating a content item."""

    async def execute(self, request: SaveContentRequest) -> AdminContentView:
        """Execute save content flow.

        Args:
            request: Save content request

        Returns:
            The stored content

        Raises:
            ValidationError: If the title, description or video URL is invalid
            NotFoundError: If updating a content item that does not exist
        """
        status = parse_status(request.status)
        if request.content_id is None:
            content = await self.content_service.create_content(
                title=request.title,
                description=request.description,
                video_url=request.video_url,
                status=status,
            )
        else:
            content = await self.content_service.update_content(
                content_id=ContentId(request.content_id),
                title=request.title,
                description=request.description,
                video_url=request.video_url,
                status=status,
            )
        return await self._view(content)
