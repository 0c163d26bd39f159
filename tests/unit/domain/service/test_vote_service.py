"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from stance.domain.error import ConflictError, ForbiddenError, NotFoundError
from stance.domain.model.vote import Vote
from stance.domain.repository import ContentRepository, VoteRepository
from stance.domain.service import VoteService
from stance.domain.value import (
    ContentId,
    ContentStatus,
    Stance,
    Tally,
    VisitorIdentity,
    VoteId,
)
from tests.conftest import make_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = VisitorIdentity("10.0.0.1")
BOB = VisitorIdentity("10.0.0.2")


class TestCastVote:
    """Tests for casting and overwriting votes."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_row(self, unit_env):
        """The first vote of an identity creates its ledger entry."""
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())

        # Act
        stance, tally = await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)

        # Assert
        assert stance == Stance.AGREE
        assert tally == Tally(agree=1, disagree=0, total=1, agree_percentage=100)

    @pytest.mark.asyncio
    async def test_revote_overwrites_instead_of_adding(self, unit_env):
        """Voting again replaces the stance; there is still one row."""
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())
        await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)

        # Act
        stance, tally = await vote_service.cast_vote(content.id, ALICE, Stance.DISAGREE)

        # Assert
        assert stance == Stance.DISAGREE
        assert tally.total == 1
        assert tally.disagree == 1
        assert len(await vote_repo.find_by_content(content.id)) == 1

    @pytest.mark.asyncio
    async def test_same_stance_twice_is_idempotent(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())

        await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)
        stance, tally = await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)

        assert stance == Stance.AGREE
        assert tally.total == 1

    @pytest.mark.asyncio
    async def test_two_visitors_then_switch(self, unit_env):
        """A agrees, B disagrees, A switches: both disagree, 0%."""
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())

        # Act
        _, after_a = await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)
        _, after_b = await vote_service.cast_vote(content.id, BOB, Stance.DISAGREE)
        _, after_switch = await vote_service.cast_vote(
            content.id, ALICE, Stance.DISAGREE
        )

        # Assert
        assert after_a == Tally(agree=1, disagree=0, total=1, agree_percentage=100)
        assert after_b == Tally(agree=1, disagree=1, total=2, agree_percentage=50)
        assert after_switch == Tally(agree=0, disagree=2, total=2, agree_percentage=0)

    @pytest.mark.asyncio
    async def test_draft_content_is_not_found(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        draft = await content_repo.save(make_content(status=ContentStatus.DRAFT))

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(draft.id, ALICE, Stance.AGREE)

    @pytest.mark.asyncio
    async def test_missing_content_is_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(ContentId(uuid4()), ALICE, Stance.AGREE)

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_insert_falls_back_to_overwrite(
        self, unit_env, monkeypatch
    ):
        """Losing the unique-constraint race still records the caller's stance."""
        # Arrange
        content_repo = await unit_env.get(ContentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())
        original_create = vote_repo.create

        async def racing_create(vote: Vote) -> Vote:
            # Another request for the same identity commits first
            await original_create(
                vote.model_copy(
                    update={"id": VoteId(uuid4()), "stance": Stance.DISAGREE}
                )
            )
            return await original_create(vote)

        monkeypatch.setattr(vote_repo, "create", racing_create)

        # Act
        stance, tally = await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)

        # Assert
        assert stance == Stance.AGREE
        assert tally == Tally(agree=1, disagree=0, total=1, agree_percentage=100)

    @pytest.mark.asyncio
    async def test_overwrite_of_vanished_row_conflicts(self, unit_env, monkeypatch):
        content_repo = await unit_env.get(ContentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())
        await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)

        async def vanished(*args, **kwargs):
            return None

        monkeypatch.setattr(vote_repo, "update_stance", vanished)

        with pytest.raises(ConflictError):
            await vote_service.cast_vote(content.id, ALICE, Stance.DISAGREE)


class TestCheckVote:
    """Tests for reading the ledger."""

    @pytest.mark.asyncio
    async def test_no_vote_yet(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())
        await vote_service.cast_vote(content.id, BOB, Stance.AGREE)

        stance, tally = await vote_service.check_vote(content.id, ALICE)

        assert stance is None
        assert tally.total == 1

    @pytest.mark.asyncio
    async def test_returns_current_stance(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())
        await vote_service.cast_vote(content.id, ALICE, Stance.DISAGREE)

        stance, tally = await vote_service.check_vote(content.id, ALICE)

        assert stance == Stance.DISAGREE
        assert tally.agree_percentage == 0

    @pytest.mark.asyncio
    async def test_unknown_content_yields_empty_tally(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        stance, tally = await vote_service.check_vote(ContentId(uuid4()), ALICE)

        assert stance is None
        assert tally == Tally()


class TestRequireVote:
    """Tests for the discussion gate."""

    @pytest.mark.asyncio
    async def test_without_vote_is_forbidden(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())

        with pytest.raises(ForbiddenError, match="vote required"):
            await vote_service.require_vote(content.id, ALICE)

    @pytest.mark.asyncio
    async def test_with_vote_returns_it(self, unit_env):
        content_repo = await unit_env.get(ContentRepository)
        vote_service = await unit_env.get(VoteService)
        content = await content_repo.save(make_content())
        await vote_service.cast_vote(content.id, ALICE, Stance.AGREE)

        vote = await vote_service.require_vote(content.id, ALICE)

        assert vote.stance == Stance.AGREE
        assert vote.identity == ALICE
