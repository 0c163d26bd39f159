"""Like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from stance.config import DiscussionSettings
from stance.domain.error import ConflictError
from stance.domain.model.like import Like
from stance.domain.repository import LikeRepository
from stance.domain.value import CommentId, LikeId, VisitorIdentity
from stance.domain.value.common import ValueObject

from .base import Service
from .comment_service import CommentService
from .vote_service import VoteService


class LikeToggle(ValueObject):
    """Outcome of a like toggle."""

    liked: bool
    likes_count: int


class LikeService(Service):
    """Domain service for comment likes."""

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_service: CommentService,
        vote_service: VoteService,
        discussion_settings: DiscussionSettings,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            comment_service: Comment domain service
            vote_service: Vote domain service (optional like gate)
            discussion_settings: Discussion policy switches
        """
        self.like_repository = like_repository
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.discussion_settings = discussion_settings

    async def toggle_like(
        self, comment_id: CommentId, identity: VisitorIdentity
    ) -> LikeToggle:
        """Like the comment, or remove the like if the identity already likes it.

        Args:
            comment_id: Comment ID
            identity: Visitor identity

        Returns:
            Whether the comment is now liked, and its like count

        Raises:
            NotFoundError: If the comment is missing or not active
            ForbiddenError: If likes are vote-gated and the identity has not voted
        """
        with logfire.span(
            "like_service.toggle_like",
            comment_id=str(comment_id),
            identity=str(identity),
        ):
            comment = await self.comment_service.get_active_comment(comment_id)
            if self.discussion_settings.require_vote_to_like:
                await self.vote_service.require_vote(comment.content_id, identity)

            existing = await self.like_repository.find_by_comment_and_identity(
                comment_id, identity
            )
            if existing:
                await self.like_repository.delete_by_comment_and_identity(
                    comment_id, identity
                )
                liked = False
            else:
                try:
                    await self.like_repository.create(
                        Like(
                            id=LikeId(uuid4()),
                            comment_id=comment_id,
                            identity=identity,
                            created_at=datetime.now(),
                        )
                    )
                except ConflictError:
                    logfire.warn(
                        "Concurrent duplicate like",
                        comment_id=str(comment_id),
                        identity=str(identity),
                    )
                liked = True

            likes_count = await self.like_repository.count_by_comment(comment_id)
            logfire.info(
                "Like toggled",
                comment_id=str(comment_id),
                liked=liked,
                likes_count=likes_count,
            )
            return LikeToggle(liked=liked, likes_count=likes_count)
