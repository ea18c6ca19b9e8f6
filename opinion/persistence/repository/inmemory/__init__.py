"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
    "InMemoryUserRepository",
]
