"""Unit tests for the content use cases."""

from uuid import uuid4

import pytest

from stance.application.usecase.content.admin_content import (
    GetAdminContentRequest,
    GetAdminContentUseCase,
    ListAdminContentsUseCase,
    SaveContentRequest,
    SaveContentUseCase,
    parse_status,
)
from stance.application.usecase.content.delete_content import (
    DeleteContentRequest,
    DeleteContentUseCase,
)
from stance.application.usecase.content.get_content import (
    GetContentRequest,
    GetContentUseCase,
)
from stance.application.usecase.content.list_contents import (
    ListContentsRequest,
    ListContentsUseCase,
)
from stance.domain.error import NotFoundError
from stance.domain.repository import CommentRepository, ContentRepository
from stance.domain.service import VoteService
from stance.domain.value import (
    ContentStatus,
    DiscussionStatus,
    Stance,
    VisitorIdentity,
)
from tests.conftest import VIDEO_URL, make_comment, make_content
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("PUBLISHED", ContentStatus.PUBLISHED),
        (" published ", ContentStatus.PUBLISHED),
        ("DRAFT", ContentStatus.DRAFT),
        ("ARCHIVED", ContentStatus.DRAFT),
        ("", ContentStatus.DRAFT),
        (None, ContentStatus.DRAFT),
    ],
)
def test_parse_status_defaults_to_draft(raw, expected):
    assert parse_status(raw) == expected


class TestSaveContentUseCase:
    """Tests for SaveContentUseCase."""

    @pytest.mark.asyncio
    async def test_create_then_update(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SaveContentUseCase)

        # Act
        created = await use_case.execute(
            SaveContentRequest(
                title="Nuclear power", video_url=VIDEO_URL, status="bogus"
            )
        )
        updated = await use_case.execute(
            SaveContentRequest(
                content_id=created.id,
                title="Nuclear power, again",
                video_url=VIDEO_URL,
                status="PUBLISHED",
            )
        )

        # Assert
        assert created.status == ContentStatus.DRAFT
        assert created.votes.total == 0
        assert updated.id == created.id
        assert updated.title == "Nuclear power, again"
        assert updated.status == ContentStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_update_unknown_content(self, unit_env):
        use_case = await unit_env.get(SaveContentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SaveContentRequest(
                    content_id=uuid4(), title="Ghost", video_url=VIDEO_URL
                )
            )


class TestContentReadUseCases:
    """Tests for the public and admin read use cases."""

    @pytest.mark.asyncio
    async def test_public_page_counts_view_and_hides_flagged(self, unit_env):
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_service = await unit_env.get(VoteService)
        use_case = await unit_env.get(GetContentUseCase)
        content = await content_repo.save(make_content())
        visible = await comment_repo.save(make_comment(content.id))
        await comment_repo.save(
            make_comment(content.id, status=DiscussionStatus.FLAGGED)
        )
        await vote_service.cast_vote(
            content.id, VisitorIdentity("1.1.1.1"), Stance.AGREE
        )

        # Act
        response = await use_case.execute(GetContentRequest(content_id=content.id))

        # Assert
        assert response.views == 1
        assert response.votes.agree == 1
        assert [c.id for c in response.comments] == [str(visible.id)]

    @pytest.mark.asyncio
    async def test_public_page_of_draft_is_not_found(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        use_case = await unit_env.get(GetContentUseCase)
        draft = await content_repo.save(make_content(status=ContentStatus.DRAFT))

        with pytest.raises(NotFoundError):
            await use_case.execute(GetContentRequest(content_id=draft.id))

    @pytest.mark.asyncio
    async def test_public_and_admin_listings(self, unit_env):
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        public = await unit_env.get(ListContentsUseCase)
        admin = await unit_env.get(ListAdminContentsUseCase)
        published = await content_repo.save(make_content())
        await content_repo.save(make_content(status=ContentStatus.DRAFT))
        await comment_repo.save(make_comment(published.id))

        # Act
        public_list = await public.execute(ListContentsRequest())
        admin_list = await admin.execute()

        # Assert
        assert [c.id for c in public_list.contents] == [str(published.id)]
        assert public_list.contents[0].comments == 1
        assert len(admin_list.contents) == 2

    @pytest.mark.asyncio
    async def test_admin_get_draft(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        use_case = await unit_env.get(GetAdminContentUseCase)
        draft = await content_repo.save(make_content(status=ContentStatus.DRAFT))

        view = await use_case.execute(GetAdminContentRequest(content_id=draft.id))

        assert view.status == ContentStatus.DRAFT
        assert view.model_dump(by_alias=True)["videoId"] == draft.video_id


class TestDeleteContentUseCase:
    """Tests for DeleteContentUseCase."""

    @pytest.mark.asyncio
    async def test_reports_removed_rows(self, unit_env):
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_service = await unit_env.get(VoteService)
        use_case = await unit_env.get(DeleteContentUseCase)
        content = await content_repo.save(make_content())
        await comment_repo.save(make_comment(content.id))
        await vote_service.cast_vote(
            content.id, VisitorIdentity("1.1.1.1"), Stance.AGREE
        )

        # Act
        response = await use_case.execute(DeleteContentRequest(content_id=content.id))

        # Assert
        assert response.model_dump(by_alias=True) == {
            "success": True,
            "deletedReplies": 0,
            "deletedLikes": 0,
            "deletedComments": 1,
            "deletedVotes": 1,
        }
        assert await content_repo.find_by_id(content.id) is None
