"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from opinion.domain.model.article import Article
from opinion.domain.value import ArticleId


class ArticleRepository(ABC):
    """Read access to articles.

    Article authoring lives outside the comment subsystem; ``save`` exists
    for seeding and for the publishing flow.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass
