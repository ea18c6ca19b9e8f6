"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from opinion.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from opinion.domain.error import NotFoundError
from opinion.domain.repository import (
    ArticleRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from opinion.domain.service import CommentService, NotificationService, UserService
from opinion.domain.service.notification_content import (
    COMMENT_NOTIFICATION_TITLE,
    MENTION_NOTIFICATION_TITLE,
)
from opinion.domain.value import ArticleId
from opinion.persistence.repository.inmemory import InMemoryNotificationRepository
from tests.conftest import make_article, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class BrokenNotificationRepository(InMemoryNotificationRepository):
    """Notification store that is down."""

    async def save(self, notification):
        raise ConnectionError("notification store unreachable")


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_records_notifications(self, unit_env):
        """Mentioned users and the article author receive notifications."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        writer = await user_repo.save(make_user("writer"))
        reader = await user_repo.save(make_user("reader"))
        friend = await user_repo.save(make_user("friend"))
        article = await article_repo.save(make_article(writer))

        request = CreateCommentRequest(
            article_id=str(article.id),
            text="@friend you should read this",
            author_id=str(reader.id),
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.article_id == str(article.id)
        assert response.author_nickname == "reader"
        assert response.depth == 0
        assert response.parent_id is None
        assert response.notifications_sent == 2

        friend_inbox = await notification_repo.find_by_recipient(friend.id)
        writer_inbox = await notification_repo.find_by_recipient(writer.id)
        assert [n.title for n in friend_inbox] == [MENTION_NOTIFICATION_TITLE]
        assert [n.title for n in writer_inbox] == [COMMENT_NOTIFICATION_TITLE]

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        """A token for a user that no longer exists is rejected."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        writer = await user_repo.save(make_user("writer"))
        article = await article_repo.save(make_article(writer))

        request = CreateCommentRequest(
            article_id=str(article.id), text="Hello", author_id=str(uuid4())
        )

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unknown_article_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        reader = await user_repo.save(make_user("reader"))

        request = CreateCommentRequest(
            article_id=str(ArticleId(uuid4())), text="Hello", author_id=str(reader.id)
        )

        # Act & Assert
        with pytest.raises(NotFoundError, match="Article not found"):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_comment_survives_notification_failure(self, unit_env):
        """The comment is kept when no notification can be delivered."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        comment_repo = await unit_env.get(CommentRepository)

        use_case = CreateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            notification_service=NotificationService(
                notification_repository=BrokenNotificationRepository()
            ),
        )

        writer = await user_repo.save(make_user("writer"))
        reader = await user_repo.save(make_user("reader"))
        article = await article_repo.save(make_article(writer))

        request = CreateCommentRequest(
            article_id=str(article.id),
            text="Hello @writer",
            author_id=str(reader.id),
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.notifications_sent == 0
        assert await comment_repo.count_by_article(article.id) == 1

    @pytest.mark.asyncio
    async def test_non_uuid_author_id_raises_not_found(self, unit_env):
        """An author ID that is not a UUID cannot match any user."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        writer = await user_repo.save(make_user("writer"))
        article = await article_repo.save(make_article(writer))

        request = CreateCommentRequest(
            article_id=str(article.id), text="Hello", author_id="admin"
        )

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found: admin"):
            await use_case.execute(request)
