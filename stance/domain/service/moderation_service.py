"""Moderation domain service."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire

from stance.domain.error import InvalidStatusTransitionError, NotFoundError
from stance.domain.repository import (
    CommentRepository,
    ContentRepository,
    LikeRepository,
    ReplyRepository,
    TransactionManager,
)
from stance.domain.value import (
    CommentId,
    ContentId,
    DiscussionKind,
    DiscussionStatus,
    ReplyId,
    Stance,
)
from stance.domain.value.common import ValueObject

from .base import Service


class ModerationItem(ValueObject):
    """A comment or reply as seen by the moderation queue."""

    id: UUID
    kind: DiscussionKind
    content_id: ContentId
    content_title: Optional[str]
    parent_id: Optional[CommentId]
    author_name: str
    body: str
    stance: Stance
    status: DiscussionStatus
    likes_count: int
    replies_count: int
    created_at: datetime


class ModerationService(Service):
    """Admin operations on comments and replies.

    Moderation is never vote-gated.
    """

    def __init__(
        self,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.content_repository = content_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository
        self.transaction_manager = transaction_manager

    async def set_status(
        self,
        item_id: UUID,
        kind: DiscussionKind,
        status: DiscussionStatus,
    ) -> DiscussionStatus:
        """Move a comment or reply through the moderation state machine.

        Setting the current status again is a no-op.

        Args:
            item_id: Comment or reply ID
            kind: Which table the ID refers to
            status: Target status

        Returns:
            The status after the call

        Raises:
            NotFoundError: If the item does not exist
            InvalidStatusTransitionError: If the transition is not allowed
        """
        with logfire.span(
            "moderation_service.set_status",
            item_id=str(item_id),
            kind=kind.value,
            status=status.value,
        ):
            if kind == DiscussionKind.COMMENT:
                item = await self.comment_repository.find_by_id(CommentId(item_id))
            else:
                item = await self.reply_repository.find_by_id(ReplyId(item_id))
            if not item:
                raise NotFoundError(kind.value.capitalize(), str(item_id))

            if not item.status.can_transition_to(status):
                logfire.warn(
                    "Rejected status transition",
                    item_id=str(item_id),
                    current=item.status.value,
                    target=status.value,
                )
                raise InvalidStatusTransitionError(
                    kind.value, item.status.value, status.value
                )
            if item.status == status:
                return status

            if kind == DiscussionKind.COMMENT:
                updated = await self.comment_repository.update_status(
                    CommentId(item_id), status
                )
            else:
                updated = await self.reply_repository.update_status(
                    ReplyId(item_id), status
                )
            if not updated:
                raise NotFoundError(kind.value.capitalize(), str(item_id))

            logfire.info(
                "Discussion status changed",
                item_id=str(item_id),
                kind=kind.value,
                previous=item.status.value,
                status=status.value,
            )
            return updated.status

    async def delete(self, item_id: UUID, kind: DiscussionKind) -> None:
        """Hard delete a comment or reply.

        Deleting a comment also removes its replies and likes, atomically.

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "moderation_service.delete", item_id=str(item_id), kind=kind.value
        ):
            if kind == DiscussionKind.REPLY:
                if not await self.reply_repository.delete(ReplyId(item_id)):
                    raise NotFoundError("Reply", str(item_id))
                logfire.info("Reply deleted", reply_id=str(item_id))
                return

            comment_id = CommentId(item_id)
            if not await self.comment_repository.find_by_id(comment_id):
                raise NotFoundError("Comment", str(item_id))

            async with self.transaction_manager.atomic():
                replies = await self.reply_repository.delete_by_comments([comment_id])
                likes = await self.like_repository.delete_by_comments([comment_id])
                if not await self.comment_repository.delete(comment_id):
                    raise NotFoundError("Comment", str(item_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(item_id),
                replies=replies,
                likes=likes,
            )

    async def list_items(self) -> list[ModerationItem]:
        """List every comment and reply, any status, newest first."""
        with logfire.span("moderation_service.list_items"):
            comments = await self.comment_repository.find_all()
            replies = await self.reply_repository.find_all()

            comments_by_id = {comment.id: comment for comment in comments}
            content_ids = list({comment.content_id for comment in comments})
            titles = {
                content.id: content.title
                for content in await self.content_repository.find_by_ids(content_ids)
            }
            likes = await self.like_repository.count_by_comments(
                list(comments_by_id)
            )
            reply_counts: dict[CommentId, int] = {}
            for reply in replies:
                reply_counts[reply.comment_id] = (
                    reply_counts.get(reply.comment_id, 0) + 1
                )

            items = [
                ModerationItem(
                    id=comment.id,
                    kind=DiscussionKind.COMMENT,
                    content_id=comment.content_id,
                    content_title=titles.get(comment.content_id),
                    parent_id=None,
                    author_name=comment.author_name,
                    body=comment.body,
                    stance=comment.stance,
                    status=comment.status,
                    likes_count=likes.get(comment.id, 0),
                    replies_count=reply_counts.get(comment.id, 0),
                    created_at=comment.created_at,
                )
                for comment in comments
            ]
            for reply in replies:
                parent = comments_by_id.get(reply.comment_id)
                if parent is None:
                    continue
                items.append(
                    ModerationItem(
                        id=reply.id,
                        kind=DiscussionKind.REPLY,
                        content_id=parent.content_id,
                        content_title=titles.get(parent.content_id),
                        parent_id=reply.comment_id,
                        author_name=reply.author_name,
                        body=reply.body,
                        stance=reply.stance,
                        status=reply.status,
                        likes_count=0,
                        replies_count=0,
                        created_at=reply.created_at,
                    )
                )

            items.sort(key=lambda item: item.created_at, reverse=True)
            logfire.info("Moderation items listed", count=len(items))
            return items
