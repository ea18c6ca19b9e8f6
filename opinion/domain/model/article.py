"""Article entity (read-only for the comment subsystem)."""

from datetime import datetime

from pydantic import Field

from opinion.domain.model.common import DomainModel
from opinion.domain.value import ArticleId, Nickname, UserId


class Article(DomainModel):
    """Published article that comments attach to."""

    id: ArticleId
    title: str = Field(min_length=1, max_length=300)
    author_id: UserId
    author_nickname: Nickname  # Denormalized from users
    created_at: datetime = Field(default_factory=datetime.now)
