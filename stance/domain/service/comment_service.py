"""Comment domain service (the gated discussion store)."""

import logfire
from datetime import datetime
from uuid import uuid4

from stance.config import DiscussionSettings
from stance.domain.error import NotFoundError
from stance.domain.model.comment import Comment
from stance.domain.model.reply import Reply
from stance.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
)
from stance.domain.value import (
    CommentId,
    ContentId,
    ReplyId,
    Stance,
    VisitorIdentity,
)
from stance.domain.value.common import ValueObject

from .base import Service
from .content_service import ContentService
from .validation import (
    AUTHOR_NAME_LENGTH,
    COMMENT_BODY_LENGTH,
    REPLY_BODY_LENGTH,
    clean_text,
)
from .vote_service import VoteService


class CommentThread(ValueObject):
    """A visible comment with its visible replies and counters."""

    comment: Comment
    replies: list[Reply]
    likes_count: int
    replies_count: int


class CommentService(Service):
    """Domain service for comments and replies.

    Posting is gated on the vote ledger: an identity must hold a vote on the
    content before it can comment or reply there.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        content_service: ContentService,
        vote_service: VoteService,
        discussion_settings: DiscussionSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            reply_repository: Reply repository
            like_repository: Like repository (thread counters)
            content_service: Content domain service
            vote_service: Vote domain service (posting gate)
            discussion_settings: Discussion policy switches
        """
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository
        self.content_service = content_service
        self.vote_service = vote_service
        self.discussion_settings = discussion_settings

    async def create_comment(
        self,
        content_id: ContentId,
        identity: VisitorIdentity,
        author_name: str,
        body: str,
        stance: Stance | None = None,
    ) -> Comment:
        """Post a top-level comment on a published content item.

        Args:
            content_id: Content ID
            identity: Visitor identity
            author_name: Display name (2-20 characters after trimming)
            body: Comment text (10-500 characters after trimming)
            stance: Stance claimed by the client

        Returns:
            Created comment

        Raises:
            ValidationError: If the name or body length is out of range
            NotFoundError: If the content is missing or not published
            ForbiddenError: If the identity has not voted on the content
        """
        with logfire.span(
            "comment_service.create_comment",
            content_id=str(content_id),
            identity=str(identity),
        ):
            author_name = clean_text(author_name, "Author name", AUTHOR_NAME_LENGTH)
            body = clean_text(body, "Comment", COMMENT_BODY_LENGTH)

            await self.content_service.get_published_content(content_id)
            vote = await self.vote_service.require_vote(content_id, identity)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                content_id=content_id,
                identity=identity,
                author_name=author_name,
                body=body,
                stance=self._resolve_stance(vote.stance, stance),
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                content_id=str(content_id),
                stance=saved.stance.value,
            )
            return saved

    async def create_reply(
        self,
        comment_id: CommentId,
        identity: VisitorIdentity,
        author_name: str,
        body: str,
        stance: Stance | None = None,
    ) -> Reply:
        """Reply to an active comment.

        The vote gate is checked against the parent comment's content.

        Raises:
            ValidationError: If the name or body length is out of range
            NotFoundError: If the parent comment is missing or not active
            ForbiddenError: If the identity has not voted on the content
        """
        with logfire.span(
            "comment_service.create_reply",
            comment_id=str(comment_id),
            identity=str(identity),
        ):
            author_name = clean_text(author_name, "Author name", AUTHOR_NAME_LENGTH)
            body = clean_text(body, "Reply", REPLY_BODY_LENGTH)

            parent = await self.get_active_comment(comment_id)
            vote = await self.vote_service.require_vote(parent.content_id, identity)

            now = datetime.now()
            reply = Reply(
                id=ReplyId(uuid4()),
                comment_id=comment_id,
                identity=identity,
                author_name=author_name,
                body=body,
                stance=self._resolve_stance(vote.stance, stance),
                created_at=now,
                updated_at=now,
            )

            saved = await self.reply_repository.save(reply)
            logfire.info(
                "Reply created",
                reply_id=str(saved.id),
                comment_id=str(comment_id),
                content_id=str(parent.content_id),
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID (any status).

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_active_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment the public may interact with.

        Raises:
            NotFoundError: If the comment is missing, flagged or deleted
        """
        comment = await self.get_comment_by_id(comment_id)
        if not comment or not comment.is_active:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_discussion(self, content_id: ContentId) -> list[CommentThread]:
        """Build the public discussion of a content item.

        Active comments come newest first, each with its active replies
        oldest first. Counters use batch queries.

        Args:
            content_id: Content ID

        Returns:
            List of comment threads
        """
        with logfire.span(
            "comment_service.list_discussion", content_id=str(content_id)
        ):
            comments = await self.comment_repository.find_by_content(
                content_id, active_only=True
            )
            comment_ids = [comment.id for comment in comments]

            replies = await self.reply_repository.find_by_comments(
                comment_ids, active_only=True
            )
            likes = await self.like_repository.count_by_comments(comment_ids)

            replies_by_comment: dict[CommentId, list[Reply]] = {
                comment_id: [] for comment_id in comment_ids
            }
            for reply in replies:
                replies_by_comment[reply.comment_id].append(reply)

            threads = [
                CommentThread(
                    comment=comment,
                    replies=replies_by_comment[comment.id],
                    likes_count=likes.get(comment.id, 0),
                    replies_count=len(replies_by_comment[comment.id]),
                )
                for comment in comments
            ]
            logfire.info(
                "Discussion retrieved",
                content_id=str(content_id),
                comments=len(threads),
                replies=len(replies),
            )
            return threads

    def _resolve_stance(self, recorded: Stance, claimed: Stance | None) -> Stance:
        """Pick the stance stored on a new discussion item."""
        if claimed is None or claimed == recorded:
            return recorded
        if self.discussion_settings.trust_client_stance:
            return claimed
        logfire.warn(
            "Client stance differs from recorded vote, using recorded vote",
            claimed=claimed.value,
            recorded=recorded.value,
        )
        return recorded
