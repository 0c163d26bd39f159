"""Unit tests for ContentService."""

from uuid import uuid4

import pytest

from stance.domain.error import NotFoundError, ValidationError
from stance.domain.repository import (
    CommentRepository,
    ContentRepository,
    LikeRepository,
    ReplyRepository,
    VoteRepository,
)
from stance.domain.service import ContentService, LikeService, VoteService
from stance.domain.value import (
    ContentId,
    ContentStatus,
    DiscussionStatus,
    Stance,
    VisitorIdentity,
)
from tests.conftest import make_comment, make_content, make_reply
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAndUpdate:
    """Tests for catalog writes."""

    @pytest.mark.asyncio
    async def test_create_parses_the_video_url(self, unit_env):
        content_service = await unit_env.get(ContentService)

        content = await content_service.create_content(
            title="  Four-day work week  ",
            description="   ",
            video_url="https://www.youtube.com/shorts/abcDEF12345",
        )

        assert content.title == "Four-day work week"
        assert content.description is None
        assert content.video_id == "abcDEF12345"
        assert content.is_shorts is True
        assert content.thumbnail_url.endswith("/abcDEF12345/hqdefault.jpg")
        assert content.status == ContentStatus.DRAFT
        assert content.views == 0

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_video_host(self, unit_env):
        content_service = await unit_env.get(ContentService)

        with pytest.raises(ValidationError):
            await content_service.create_content(
                title="Clip", description=None, video_url="https://vimeo.com/1"
            )

    @pytest.mark.asyncio
    async def test_create_rejects_empty_title(self, unit_env):
        content_service = await unit_env.get(ContentService)

        with pytest.raises(ValidationError):
            await content_service.create_content(
                title="   ",
                description=None,
                video_url="https://youtu.be/dQw4w9WgXcQ",
            )

    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_keeps_views(self, unit_env):
        # Arrange
        content_service = await unit_env.get(ContentService)
        content = await content_service.create_content(
            title="Draft",
            description=None,
            video_url="https://youtu.be/dQw4w9WgXcQ",
            status=ContentStatus.PUBLISHED,
        )
        await content_service.record_view(content.id)

        # Act
        updated = await content_service.update_content(
            content.id,
            title="Final title",
            description="Now with context",
            video_url="https://www.youtube.com/watch?v=abcDEF12345",
            status=ContentStatus.DRAFT,
        )

        # Assert
        assert updated.title == "Final title"
        assert updated.description == "Now with context"
        assert updated.video_id == "abcDEF12345"
        assert updated.status == ContentStatus.DRAFT
        assert updated.views == 1
        assert updated.created_at == content.created_at

    @pytest.mark.asyncio
    async def test_update_missing_content(self, unit_env):
        content_service = await unit_env.get(ContentService)

        with pytest.raises(NotFoundError):
            await content_service.update_content(
                ContentId(uuid4()),
                title="Anything",
                description=None,
                video_url="https://youtu.be/dQw4w9WgXcQ",
                status=ContentStatus.PUBLISHED,
            )


class TestReads:
    """Tests for catalog reads and views."""

    @pytest.mark.asyncio
    async def test_public_listing_hides_drafts(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        content_service = await unit_env.get(ContentService)
        published = await content_repo.save(make_content())
        draft = await content_repo.save(make_content(status=ContentStatus.DRAFT))

        public = await content_service.list_contents()
        everything = await content_service.list_contents(published_only=False)

        assert [c.id for c in public] == [published.id]
        assert {c.id for c in everything} == {published.id, draft.id}

    @pytest.mark.asyncio
    async def test_record_view_counts_published_only(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        content_service = await unit_env.get(ContentService)
        published = await content_repo.save(make_content())
        draft = await content_repo.save(make_content(status=ContentStatus.DRAFT))

        await content_service.record_view(published.id)
        viewed = await content_service.record_view(published.id)

        assert viewed.views == 2
        with pytest.raises(NotFoundError):
            await content_service.record_view(draft.id)
        assert (await content_repo.find_by_id(draft.id)).views == 0

    @pytest.mark.asyncio
    async def test_count_discussion_includes_every_status(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        content_service = await unit_env.get(ContentService)
        content = await content_repo.save(make_content())
        comment = await comment_repo.save(make_comment(content.id))
        await comment_repo.save(
            make_comment(content.id, status=DiscussionStatus.FLAGGED)
        )
        await reply_repo.save(make_reply(comment.id))

        assert await content_service.count_discussion(content.id) == 3


class TestDeleteContent:
    """Tests for the cascade delete."""

    async def _seed(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        vote_service = await unit_env.get(VoteService)
        like_service = await unit_env.get(LikeService)

        content = await content_repo.save(make_content())
        for i in range(3):
            await vote_service.cast_vote(
                content.id, VisitorIdentity(f"10.0.0.{i}"), Stance.AGREE
            )
        first = await comment_repo.save(make_comment(content.id))
        second = await comment_repo.save(make_comment(content.id))
        await reply_repo.save(make_reply(first.id))
        await reply_repo.save(make_reply(first.id))
        await reply_repo.save(make_reply(second.id))
        await like_service.toggle_like(first.id, VisitorIdentity("10.0.0.1"))
        await like_service.toggle_like(second.id, VisitorIdentity("10.0.0.1"))
        await like_service.toggle_like(second.id, VisitorIdentity("10.0.0.2"))
        return content, [first.id, second.id]

    @pytest.mark.asyncio
    async def test_removes_every_dependent_row(self, unit_env):
        """After the cascade nothing references the deleted content."""
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        like_repo = await unit_env.get(LikeRepository)
        content_service = await unit_env.get(ContentService)
        content, comment_ids = await self._seed(unit_env)
        survivor = await content_repo.save(make_content(title="Unrelated"))
        survivor_comment = await comment_repo.save(make_comment(survivor.id))

        # Act
        result = await content_service.delete_content(content.id)

        # Assert
        assert (result.replies, result.likes, result.comments, result.votes) == (
            3,
            3,
            2,
            3,
        )
        assert await content_repo.find_by_id(content.id) is None
        assert await vote_repo.find_by_content(content.id) == []
        assert await comment_repo.find_by_content(content.id, active_only=False) == []
        assert await reply_repo.count_by_comments(comment_ids) == 0
        assert await like_repo.count_by_comments(comment_ids) == {
            comment_ids[0]: 0,
            comment_ids[1]: 0,
        }
        assert await comment_repo.find_by_id(survivor_comment.id) is not None

    @pytest.mark.asyncio
    async def test_failure_mid_cascade_removes_nothing(self, unit_env, monkeypatch):
        """A failing step rolls back the steps that already ran."""
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        like_repo = await unit_env.get(LikeRepository)
        content_service = await unit_env.get(ContentService)
        content, comment_ids = await self._seed(unit_env)

        async def broken_delete(content_id):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(vote_repo, "delete_by_content", broken_delete)

        # Act
        with pytest.raises(RuntimeError):
            await content_service.delete_content(content.id)

        # Assert
        assert await content_repo.find_by_id(content.id) is not None
        assert len(await vote_repo.find_by_content(content.id)) == 3
        assert len(await comment_repo.find_by_content(content.id)) == 2
        assert await reply_repo.count_by_comments(comment_ids) == 3
        assert sum((await like_repo.count_by_comments(comment_ids)).values()) == 3

    @pytest.mark.asyncio
    async def test_missing_content(self, unit_env):
        content_service = await unit_env.get(ContentService)

        with pytest.raises(NotFoundError):
            await content_service.delete_content(ContentId(uuid4()))
