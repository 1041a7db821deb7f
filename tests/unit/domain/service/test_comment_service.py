"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from persona.domain.error import NotFoundError
from persona.domain.repository import CommentRepository, ProfileRepository
from persona.domain.service import CommentService
from persona.domain.value import CommentId, PersonalitySystem, ProfileId
from tests.conftest import make_comment, make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

MBTI = PersonalitySystem.MBTI


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_starts_with_empty_tally(self, unit_env):
        """New comments should be visible with zero votes in every system."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await profile_repo.save(make_profile(1))

        # Act
        result = await comment_service.create_comment(
            profile_id=ProfileId(1),
            content="  Definitely an ISFJ.  ",
            author="reader",
            title="Type guess",
        )

        # Assert
        assert result.content == "Definitely an ISFJ."
        assert result.is_visible
        assert result.total_votes == 0
        assert all(values == {} for values in result.vote_stats.values())

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_profile_raises(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Profile not found"):
            await comment_service.create_comment(
                profile_id=ProfileId(404), content="Hello", author="reader"
            )


class TestUpdateAndDeleteComment:
    """Tests for editing and soft-deleting comments."""

    @pytest.mark.asyncio
    async def test_update_changes_text_but_not_tally(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(vote_stats={MBTI: {"INTJ": 3}}))

        # Act
        updated = await comment_service.update_comment(
            comment.id, content="Edited", title="New title"
        )

        # Assert
        assert updated.content == "Edited"
        assert updated.title == "New title"
        assert updated.vote_stats == comment.vote_stats
        assert updated.total_votes == 3

    @pytest.mark.asyncio
    async def test_delete_hides_comment_and_keeps_tally(self, unit_env):
        """Deleting is a soft delete: hidden from reads, tally preserved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(vote_stats={MBTI: {"INTJ": 3}}))

        # Act
        await comment_service.delete_comment(comment.id)

        # Assert
        stored = await comment_repo.find_by_id(comment.id)
        assert stored is not None
        assert not stored.is_visible
        assert stored.total_votes == 3
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(comment.id)
        assert await comment_service.count_comments() == 0

    @pytest.mark.asyncio
    async def test_hidden_comment_can_be_restored(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(is_visible=False))

        # Act
        await comment_service.update_comment(comment.id, is_visible=True)

        # Assert
        assert (await comment_service.get_comment(comment.id)).id == comment.id

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.update_comment(CommentId(uuid4()), content="x")


class TestOverview:
    """Tests for the comment overview."""

    @pytest.mark.asyncio
    async def test_overview_counts_and_ranks(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        quiet = await comment_repo.save(make_comment(minutes=1))
        popular = await comment_repo.save(
            make_comment(minutes=2, vote_stats={MBTI: {"INTJ": 2}})
        )

        # Act
        overview = await comment_service.get_overview(top_limit=1)

        # Assert
        assert overview.total_comments == 2
        assert [c.id for c in overview.top_comments] == [popular.id]
        assert quiet.id not in {c.id for c in overview.top_comments}
