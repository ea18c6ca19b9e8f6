"""PostgreSQL repository implementations."""

from opinion.persistence.repository.article import PostgresArticleRepository
from opinion.persistence.repository.comment import PostgresCommentRepository
from opinion.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from opinion.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
    "PostgresUserRepository",
]
