"""Unit tests for UpdateCommentUseCase."""

import pytest

from opinion.application.usecase.comment.update_comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from opinion.domain.error import NoAccessError
from opinion.domain.repository import CommentRepository, UserRepository
from tests.conftest import make_article, make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_text_success(self, unit_env):
        """Updating comment text by author should succeed."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author = await user_repo.save(make_user("author"))
        comment = await comment_repo.save(
            make_comment(make_article(author), author, text="Original comment")
        )

        request = UpdateCommentRequest(
            comment_id=str(comment.id),
            user_id=str(author.id),
            text="Updated comment",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.comment_id == str(comment.id)
        assert response.text == "Updated comment"
        assert response.altered is True

        saved_comment = await comment_repo.find_by_id(comment.id)
        assert saved_comment.text == "Updated comment"

    @pytest.mark.asyncio
    async def test_update_comment_not_authorized_when_not_author(self, unit_env):
        """Updating comment by non-author should raise NoAccessError."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author = await user_repo.save(make_user("author"))
        intruder = await user_repo.save(make_user("intruder"))
        comment = await comment_repo.save(
            make_comment(make_article(author), author, text="Original comment")
        )

        request = UpdateCommentRequest(
            comment_id=str(comment.id),
            user_id=str(intruder.id),
            text="Hacked comment",
        )

        # Act & Assert
        with pytest.raises(NoAccessError):
            await use_case.execute(request)

        saved_comment = await comment_repo.find_by_id(comment.id)
        assert saved_comment.text == "Original comment"
        assert saved_comment.altered is False
