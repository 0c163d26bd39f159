"""Unit tests for ModerationService."""

from uuid import uuid4

import pytest

from stance.domain.error import InvalidStatusTransitionError, NotFoundError
from stance.domain.repository import (
    CommentRepository,
    ContentRepository,
    LikeRepository,
    ReplyRepository,
)
from stance.domain.service import LikeService, ModerationService
from stance.domain.value import (
    DiscussionKind,
    DiscussionStatus,
    VisitorIdentity,
)
from tests.conftest import make_comment, make_content, make_reply
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSetStatus:
    """Tests for the moderation state machine."""

    @pytest.mark.asyncio
    async def test_flag_and_restore_comment(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        moderation = await unit_env.get(ModerationService)
        content = await content_repo.save(make_content())
        comment = await comment_repo.save(make_comment(content.id))

        flagged = await moderation.set_status(
            comment.id, DiscussionKind.COMMENT, DiscussionStatus.FLAGGED
        )
        restored = await moderation.set_status(
            comment.id, DiscussionKind.COMMENT, DiscussionStatus.ACTIVE
        )

        assert flagged == DiscussionStatus.FLAGGED
        assert restored == DiscussionStatus.ACTIVE
        assert (await comment_repo.find_by_id(comment.id)).is_active

    @pytest.mark.asyncio
    async def test_flag_reply(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        moderation = await unit_env.get(ModerationService)
        content = await content_repo.save(make_content())
        comment = await comment_repo.save(make_comment(content.id))
        reply = await reply_repo.save(make_reply(comment.id))

        status = await moderation.set_status(
            reply.id, DiscussionKind.REPLY, DiscussionStatus.FLAGGED
        )

        assert status == DiscussionStatus.FLAGGED
        assert (await reply_repo.find_by_id(reply.id)).status == DiscussionStatus.FLAGGED

    @pytest.mark.asyncio
    async def test_same_status_is_a_no_op(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        moderation = await unit_env.get(ModerationService)
        content = await content_repo.save(make_content())
        comment = await comment_repo.save(make_comment(content.id))

        status = await moderation.set_status(
            comment.id, DiscussionKind.COMMENT, DiscussionStatus.ACTIVE
        )

        assert status == DiscussionStatus.ACTIVE
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.updated_at == comment.updated_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "target", [DiscussionStatus.ACTIVE, DiscussionStatus.FLAGGED]
    )
    async def test_deleted_is_terminal(self, unit_env, target):
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        moderation = await unit_env.get(ModerationService)
        content = await content_repo.save(make_content())
        comment = await comment_repo.save(
            make_comment(content.id, status=DiscussionStatus.DELETED)
        )

        with pytest.raises(InvalidStatusTransitionError):
            await moderation.set_status(comment.id, DiscussionKind.COMMENT, target)

    @pytest.mark.asyncio
    async def test_unknown_item(self, unit_env):
        moderation = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError):
            await moderation.set_status(
                uuid4(), DiscussionKind.REPLY, DiscussionStatus.FLAGGED
            )


class TestDelete:
    """Tests for hard deletes."""

    @pytest.mark.asyncio
    async def test_deleting_comment_removes_replies_and_likes(self, unit_env):
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        like_repo = await unit_env.get(LikeRepository)
        like_service = await unit_env.get(LikeService)
        moderation = await unit_env.get(ModerationService)
        content = await content_repo.save(make_content())
        doomed = await comment_repo.save(make_comment(content.id))
        kept = await comment_repo.save(make_comment(content.id))
        await reply_repo.save(make_reply(doomed.id))
        kept_reply = await reply_repo.save(make_reply(kept.id))
        await like_service.toggle_like(doomed.id, VisitorIdentity("10.0.0.9"))
        await like_service.toggle_like(kept.id, VisitorIdentity("10.0.0.9"))

        # Act
        await moderation.delete(doomed.id, DiscussionKind.COMMENT)

        # Assert
        assert await comment_repo.find_by_id(doomed.id) is None
        assert await reply_repo.count_by_comments([doomed.id]) == 0
        assert await like_repo.count_by_comment(doomed.id) == 0
        assert await reply_repo.find_by_id(kept_reply.id) is not None
        assert await like_repo.count_by_comment(kept.id) == 1

    @pytest.mark.asyncio
    async def test_deleting_reply_leaves_parent(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        moderation = await unit_env.get(ModerationService)
        content = await content_repo.save(make_content())
        comment = await comment_repo.save(make_comment(content.id))
        reply = await reply_repo.save(make_reply(comment.id))

        await moderation.delete(reply.id, DiscussionKind.REPLY)

        assert await reply_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", [DiscussionKind.COMMENT, DiscussionKind.REPLY])
    async def test_unknown_item(self, unit_env, kind):
        moderation = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError):
            await moderation.delete(uuid4(), kind)


class TestListItems:
    """Tests for the moderation queue."""

    @pytest.mark.asyncio
    async def test_merges_comments_and_replies_newest_first(self, unit_env):
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        moderation = await unit_env.get(ModerationService)
        content = await content_repo.save(make_content(title="Remote work"))
        comment = await comment_repo.save(
            make_comment(content.id, status=DiscussionStatus.FLAGGED, minutes_ago=10)
        )
        reply = await reply_repo.save(make_reply(comment.id, minutes_ago=5))

        # Act
        items = await moderation.list_items()

        # Assert
        assert [item.id for item in items] == [reply.id, comment.id]
        reply_item, comment_item = items
        assert reply_item.kind == DiscussionKind.REPLY
        assert reply_item.parent_id == comment.id
        assert reply_item.content_id == content.id
        assert reply_item.content_title == "Remote work"
        assert comment_item.status == DiscussionStatus.FLAGGED
        assert comment_item.replies_count == 1
        assert comment_item.parent_id is None

    @pytest.mark.asyncio
    async def test_empty_queue(self, unit_env):
        moderation = await unit_env.get(ModerationService)

        assert await moderation.list_items() == []
