"""Unit tests for CreateCommentUseCase."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from persona.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from persona.domain.error import NotFoundError
from persona.domain.repository import CommentRepository, ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_starts_with_empty_tallies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await profile_repo.save(make_profile(7))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                profile_id=7,
                content="Reads like a textbook 9w1.",
                title="Enneagram take",
                author="tester",
            )
        )

        # Assert
        assert response.message == "Comment created successfully"
        assert response.comment.profile_id == 7
        assert response.comment.total_votes == 0
        assert response.comment.vote_stats == {"mbti": {}, "enneagram": {}, "zodiac": {}}
        assert await comment_repo.count(profile_id=7) == 1

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_profile_fails(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(profile_id=404, content="Hello", author="tester")
            )
        assert exc_info.value.resource == "Profile"

    def test_request_accepts_camel_case_and_limits_content(self):
        request = CreateCommentRequest.model_validate(
            {"profileId": 1, "content": "ok", "author": "tester"}
        )
        assert request.profile_id == 1

        with pytest.raises(PydanticValidationError):
            CreateCommentRequest(profile_id=1, content="x" * 1001, author="tester")
        with pytest.raises(PydanticValidationError):
            CreateCommentRequest(profile_id=0, content="ok", author="tester")
