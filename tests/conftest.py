"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from opinion.domain.model import Article, Comment, User
from opinion.domain.value import ArticleId, CommentId, Nickname, UserId


def make_user(nickname: str = "alice", **overrides) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=overrides.pop("id", UserId(uuid4())),
        nickname=Nickname(nickname),
        email=overrides.pop("email", f"{nickname}@example.org"),
        **overrides,
    )


def make_article(author: User, title: str = "On peer review", **overrides) -> Article:
    """Build an article written by ``author``."""
    return Article(
        id=overrides.pop("id", ArticleId(uuid4())),
        title=title,
        author_id=author.id,
        author_nickname=author.nickname,
        **overrides,
    )


def make_comment(
    article: Article,
    author: User,
    text: str = "Interesting read",
    parent: Comment | None = None,
    minutes: int = 0,
) -> Comment:
    """Build a root comment, or a reply when ``parent`` is given.

    ``minutes`` shifts created_at so tests can control ordering.
    """
    created_at = datetime(2024, 1, 1, 12, 0, 0) + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        article_id=article.id,
        author_id=author.id,
        author_nickname=author.nickname,
        text=text,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        altered=False,
        created_at=created_at,
        updated_at=created_at,
    )
