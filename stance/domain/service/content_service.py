"""Content domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from stance.domain.error import NotFoundError, ValidationError
from stance.domain.model.content import Content
from stance.domain.repository import (
    CommentRepository,
    ContentRepository,
    LikeRepository,
    ReplyRepository,
    TransactionManager,
    VoteRepository,
)
from stance.domain.value import ContentId, ContentStatus, VideoRef
from stance.domain.value.common import ValueObject

from .base import Service
from .validation import TITLE_LENGTH, clean_description, clean_text


class CascadeDeleteResult(ValueObject):
    """Rows removed by a content cascade delete."""

    content_id: ContentId
    replies: int
    likes: int
    comments: int
    votes: int


class ContentService(Service):
    """Domain service for the content catalog."""

    def __init__(
        self,
        content_repository: ContentRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
            vote_repository: Vote repository (cascade delete)
            comment_repository: Comment repository (cascade delete, counts)
            reply_repository: Reply repository (cascade delete, counts)
            like_repository: Like repository (cascade delete)
            transaction_manager: Atomic block provider for the cascade
        """
        self.content_repository = content_repository
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository
        self.transaction_manager = transaction_manager

    async def get_content_by_id(self, content_id: ContentId) -> Content | None:
        """Get a content item by ID, whatever its status.

        Args:
            content_id: Content ID

        Returns:
            Content if found, None otherwise
        """
        with logfire.span(
            "content_service.get_content_by_id", content_id=str(content_id)
        ):
            content = await self.content_repository.find_by_id(content_id)
            if not content:
                logfire.warn("Content not found", content_id=str(content_id))
            return content

    async def get_published_content(self, content_id: ContentId) -> Content:
        """Get a content item the public is allowed to interact with.

        Args:
            content_id: Content ID

        Returns:
            The published content

        Raises:
            NotFoundError: If the content is missing or still a draft
        """
        content = await self.get_content_by_id(content_id)
        if not content or not content.is_published:
            raise NotFoundError("Content", str(content_id))
        return content

    async def list_contents(self, published_only: bool = True) -> list[Content]:
        """List content items, newest first.

        Args:
            published_only: Hide drafts (public listing)

        Returns:
            List of content items
        """
        with logfire.span(
            "content_service.list_contents", published_only=published_only
        ):
            status = ContentStatus.PUBLISHED if published_only else None
            contents = await self.content_repository.find_all(status=status)
            logfire.info("Contents listed", count=len(contents))
            return contents

    async def create_content(
        self,
        title: str,
        description: str | None,
        video_url: str,
        status: ContentStatus = ContentStatus.DRAFT,
    ) -> Content:
        """Create a content item from a video URL.

        Args:
            title: Title
            description: Optional description
            video_url: YouTube watch/short/embed/shorts URL
            status: Initial status (drafts by default)

        Returns:
            Created content

        Raises:
            ValidationError: If the URL is not a recognised video URL
        """
        with logfire.span("content_service.create_content", title=title):
            video = self._parse_video(video_url)
            now = datetime.now()
            content = Content(
                id=ContentId(uuid4()),
                title=clean_text(title, "Title", TITLE_LENGTH),
                description=clean_description(description),
                video_url=video.url,
                video_id=video.video_id,
                thumbnail_url=video.thumbnail_url,
                is_shorts=video.is_shorts,
                status=status,
                views=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.content_repository.save(content)
            logfire.info(
                "Content created",
                content_id=str(saved.id),
                video_id=saved.video_id,
                status=saved.status.value,
            )
            return saved

    async def update_content(
        self,
        content_id: ContentId,
        title: str,
        description: str | None,
        video_url: str,
        status: ContentStatus,
    ) -> Content:
        """Replace the editable fields of a content item.

        Raises:
            NotFoundError: If the content does not exist
            ValidationError: If the URL is not a recognised video URL
        """
        with logfire.span(
            "content_service.update_content", content_id=str(content_id)
        ):
            existing = await self.content_repository.find_by_id(content_id)
            if not existing:
                raise NotFoundError("Content", str(content_id))

            video = self._parse_video(video_url)
            updated = existing.model_copy(
                update={
                    "title": clean_text(title, "Title", TITLE_LENGTH),
                    "description": clean_description(description),
                    "video_url": video.url,
                    "video_id": video.video_id,
                    "thumbnail_url": video.thumbnail_url,
                    "is_shorts": video.is_shorts,
                    "status": status,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.content_repository.save(updated)
            logfire.info(
                "Content updated",
                content_id=str(content_id),
                status=saved.status.value,
            )
            return saved

    async def record_view(self, content_id: ContentId) -> Content:
        """Count a public view of a published content item.

        Raises:
            NotFoundError: If the content is missing or still a draft
        """
        with logfire.span("content_service.record_view", content_id=str(content_id)):
            await self.get_published_content(content_id)
            updated = await self.content_repository.increment_views(content_id)
            if not updated:
                raise NotFoundError("Content", str(content_id))
            return updated

    async def count_discussion(self, content_id: ContentId) -> int:
        """Count comments plus replies on a content item (any status)."""
        comments = await self.comment_repository.find_by_content(
            content_id, active_only=False
        )
        replies = await self.reply_repository.count_by_comments(
            [comment.id for comment in comments]
        )
        return len(comments) + replies

    async def delete_content(self, content_id: ContentId) -> CascadeDeleteResult:
        """Delete a content item and everything that hangs off it.

        Runs in one atomic block, in dependency order: replies, likes,
        comments, votes, then the content row. If any step fails, nothing
        is removed.

        Args:
            content_id: Content ID

        Returns:
            Number of removed rows per table

        Raises:
            NotFoundError: If the content does not exist
        """
        with logfire.span(
            "content_service.delete_content", content_id=str(content_id)
        ):
            existing = await self.content_repository.find_by_id(content_id)
            if not existing:
                raise NotFoundError("Content", str(content_id))

            async with self.transaction_manager.atomic():
                comments = await self.comment_repository.find_by_content(
                    content_id, active_only=False
                )
                comment_ids = [comment.id for comment in comments]

                replies = await self.reply_repository.delete_by_comments(comment_ids)
                likes = await self.like_repository.delete_by_comments(comment_ids)
                removed_comments = await self.comment_repository.delete_by_content(
                    content_id
                )
                votes = await self.vote_repository.delete_by_content(content_id)
                await self.content_repository.delete(content_id)

            result = CascadeDeleteResult(
                content_id=content_id,
                replies=replies,
                likes=likes,
                comments=removed_comments,
                votes=votes,
            )
            logfire.info(
                "Content deleted",
                content_id=str(content_id),
                replies=replies,
                likes=likes,
                comments=removed_comments,
                votes=votes,
            )
            return result

    @staticmethod
    def _parse_video(video_url: str) -> VideoRef:
        try:
            return VideoRef.from_url(video_url)
        except ValueError as e:
            logfire.warn("Invalid video URL", video_url=video_url)
            raise ValidationError(str(e)) from e
