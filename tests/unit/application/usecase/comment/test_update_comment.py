"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from persona.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from persona.domain.error import NotFoundError, ValidationError
from persona.domain.repository import CommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(title="Original"))

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(comment_id=str(comment.id), content="Edited text")
        )

        # Assert
        assert response.comment.content == "Edited text"
        assert response.comment.title == "Original"

    @pytest.mark.asyncio
    async def test_update_without_changes_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment())

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(UpdateCommentRequest(comment_id=str(comment.id)))
        assert exc_info.value.field == "body"

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(comment_id=str(uuid4()), content="Edited")
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_hides_comment(self, unit_env):
        """Deleted comments disappear from listings but keep their row."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment())

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id))
        )

        # Assert
        assert response.message == "Comment deleted successfully"
        assert await comment_repo.count() == 0
        stored = await comment_repo.find_by_id(comment.id)
        assert stored is not None
        assert stored.is_visible is False
