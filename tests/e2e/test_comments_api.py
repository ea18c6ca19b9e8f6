"""End-to-end tests for comment and notification endpoints."""

import asyncio
from uuid import uuid4

import pytest
from dishka import Provider, Scope, make_async_container, provide
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from opinion.config import Settings
from opinion.domain.repository import (
    ArticleRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from opinion.interface.api.app import create_app
from opinion.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryUserRepository,
)
from opinion.util.di import (
    ProdApplicationProvider,
    ProdConfigProvider,
    ProdDomainProvider,
)
from opinion.util.jwt import create_token
from tests.conftest import make_article, make_comment, make_user


class SharedPersistenceProvider(Provider):
    """In-memory repositories shared by every request of one test client."""

    def __init__(self) -> None:
        super().__init__()
        self.users = InMemoryUserRepository()
        self.articles = InMemoryArticleRepository()
        self.comments = InMemoryCommentRepository()
        self.notifications = InMemoryNotificationRepository()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self.users

    @provide(scope=Scope.APP)
    def get_article_repository(self) -> ArticleRepository:
        return self.articles

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return self.comments

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        return self.notifications


class World:
    """Seeded data and helpers for one test."""

    def __init__(self, client: TestClient, persistence: SharedPersistenceProvider):
        self.client = client
        self.persistence = persistence
        auth_settings = Settings().auth

        self.writer = make_user("writer")
        self.reader = make_user("reader")
        self.outsider = make_user("outsider")
        self.article = make_article(self.writer)
        self.root = make_comment(self.article, self.writer, text="First!")
        self.reply = make_comment(
            self.article, self.reader, text="Second", parent=self.root, minutes=1
        )

        async def seed():
            for user in (self.writer, self.reader, self.outsider):
                await persistence.users.save(user)
            await persistence.articles.save(self.article)
            await persistence.comments.save(self.root)
            await persistence.comments.save(self.reply)

        asyncio.run(seed())

        self.tokens = {
            user.nickname.root: create_token(
                str(user.id), user.nickname.root, auth_settings
            )
            for user in (self.writer, self.reader, self.outsider)
        }

    def cookies(self, nickname: str) -> dict[str, str]:
        return {"auth_token": self.tokens[nickname]}


@pytest.fixture
def world():
    """Create test client with in-memory persistence and seeded data."""
    persistence = SharedPersistenceProvider()
    container = make_async_container(
        ProdConfigProvider(),
        ProdDomainProvider(),
        ProdApplicationProvider(),
        persistence,
        FastapiProvider(),
    )
    app_instance = create_app(container)
    return World(TestClient(app_instance), persistence)


class TestHealthEndpoint:
    def test_health(self, world):
        response = world.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestReadComments:
    """Reading comments needs no authentication."""

    def test_list_comments_with_replies(self, world):
        # Act
        response = world.client.get(f"/articles/{world.article.id}/comments")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["page"] == 0
        assert [item["comment_id"] for item in body["items"]] == [str(world.root.id)]
        assert [r["comment_id"] for r in body["items"][0]["replies"]] == [
            str(world.reply.id)
        ]

    def test_list_comments_for_unknown_article(self, world):
        response = world.client.get(f"/articles/{uuid4()}/comments")

        assert response.status_code == 404

    def test_list_comments_rejects_bad_paging(self, world):
        response = world.client.get(
            f"/articles/{world.article.id}/comments", params={"page": -1}
        )

        assert response.status_code == 422

    def test_malformed_article_id(self, world):
        response = world.client.get("/articles/not-a-uuid/comments")

        assert response.status_code == 422

    def test_count_comments(self, world):
        response = world.client.get(f"/articles/{world.article.id}/comments/count")

        assert response.status_code == 200
        assert response.json()["total"] == 2


class TestCreateComment:
    """POST /articles/{article_id}/comments."""

    def test_create_without_auth_fails(self, world):
        response = world.client.post(
            f"/articles/{world.article.id}/comments", json={"text": "Hi"}
        )

        assert response.status_code == 401
        assert "Authentication required" in response.json()["detail"]

    def test_create_with_invalid_token_fails(self, world):
        response = world.client.post(
            f"/articles/{world.article.id}/comments",
            json={"text": "Hi"},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_create_comment_notifies_author_and_mentions(self, world):
        # Act
        response = world.client.post(
            f"/articles/{world.article.id}/comments",
            json={"text": "@outsider have a look"},
            cookies=world.cookies("reader"),
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["depth"] == 0
        assert body["author_nickname"] == "reader"
        assert body["notifications_sent"] == 2

        inbox = world.client.get("/notifications", cookies=world.cookies("outsider"))
        assert inbox.status_code == 200
        assert inbox.json()["unread"] == 1
        assert inbox.json()["notifications"][0]["title"] == (
            "You were mentioned in a comment"
        )

    def test_create_on_unknown_article(self, world):
        response = world.client.post(
            f"/articles/{uuid4()}/comments",
            json={"text": "Hi"},
            cookies=world.cookies("reader"),
        )

        assert response.status_code == 404

    def test_create_with_empty_text(self, world):
        response = world.client.post(
            f"/articles/{world.article.id}/comments",
            json={"text": ""},
            cookies=world.cookies("reader"),
        )

        assert response.status_code == 422


class TestReplyToComment:
    """POST /comments/{comment_id}/replies."""

    def test_reply_to_root(self, world):
        response = world.client.post(
            f"/comments/{world.root.id}/replies",
            json={"text": "Agreed"},
            cookies=world.cookies("outsider"),
        )

        assert response.status_code == 201
        assert response.json()["parent_id"] == str(world.root.id)
        assert response.json()["depth"] == 1

    def test_reply_to_reply_is_rejected(self, world):
        response = world.client.post(
            f"/comments/{world.reply.id}/replies",
            json={"text": "Too deep"},
            cookies=world.cookies("outsider"),
        )

        assert response.status_code == 400

        count = world.client.get(f"/articles/{world.article.id}/comments/count")
        assert count.json()["total"] == 2

    def test_reply_to_unknown_comment(self, world):
        response = world.client.post(
            f"/comments/{uuid4()}/replies",
            json={"text": "Hello?"},
            cookies=world.cookies("outsider"),
        )

        assert response.status_code == 404


class TestEditAndDelete:
    """PUT and DELETE /comments/{comment_id}."""

    def test_author_can_edit(self, world):
        response = world.client.put(
            f"/comments/{world.root.id}",
            json={"text": "First! (edited)"},
            cookies=world.cookies("writer"),
        )

        assert response.status_code == 200
        assert response.json()["text"] == "First! (edited)"
        assert response.json()["altered"] is True

    def test_other_user_cannot_edit(self, world):
        response = world.client.put(
            f"/comments/{world.root.id}",
            json={"text": "Hijacked"},
            cookies=world.cookies("outsider"),
        )

        assert response.status_code == 400

    def test_edit_unknown_comment(self, world):
        response = world.client.put(
            f"/comments/{uuid4()}",
            json={"text": "Edited"},
            cookies=world.cookies("writer"),
        )

        assert response.status_code == 404

    def test_other_user_cannot_delete(self, world):
        response = world.client.delete(
            f"/comments/{world.root.id}", cookies=world.cookies("reader")
        )

        assert response.status_code == 400

    def test_author_deletes_thread(self, world):
        # Act
        response = world.client.delete(
            f"/comments/{world.root.id}", cookies=world.cookies("writer")
        )

        # Assert
        assert response.status_code == 204
        count = world.client.get(f"/articles/{world.article.id}/comments/count")
        assert count.json()["total"] == 0

    def test_delete_without_auth_fails(self, world):
        response = world.client.delete(f"/comments/{world.root.id}")

        assert response.status_code == 401


class TestNotifications:
    """GET /notifications and POST /notifications/{id}/read."""

    def test_list_without_auth_fails(self, world):
        response = world.client.get("/notifications")

        assert response.status_code == 401

    def test_mark_read(self, world):
        # Arrange - reader comments, writer gets notified
        world.client.post(
            f"/articles/{world.article.id}/comments",
            json={"text": "Nice work"},
            cookies=world.cookies("reader"),
        )
        inbox = world.client.get("/notifications", cookies=world.cookies("writer"))
        notification_id = inbox.json()["notifications"][0]["notification_id"]

        # Act
        response = world.client.post(
            f"/notifications/{notification_id}/read", cookies=world.cookies("writer")
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["is_read"] is True
        inbox = world.client.get("/notifications", cookies=world.cookies("writer"))
        assert inbox.json()["unread"] == 0

    def test_mark_read_of_someone_elses_notification(self, world):
        world.client.post(
            f"/articles/{world.article.id}/comments",
            json={"text": "Nice work"},
            cookies=world.cookies("reader"),
        )
        inbox = world.client.get("/notifications", cookies=world.cookies("writer"))
        notification_id = inbox.json()["notifications"][0]["notification_id"]

        response = world.client.post(
            f"/notifications/{notification_id}/read", cookies=world.cookies("reader")
        )

        assert response.status_code == 400

    def test_mark_read_of_unknown_notification(self, world):
        response = world.client.post(
            f"/notifications/{uuid4()}/read", cookies=world.cookies("writer")
        )

        assert response.status_code == 404

    def test_token_with_non_uuid_user_id_is_unauthenticated(self, world):
        token = create_token("admin", "admin", Settings().auth)

        response = world.client.post(
            f"/articles/{world.article.id}/comments",
            json={"text": "Hi"},
            cookies={"auth_token": token},
        )

        assert response.status_code == 401
