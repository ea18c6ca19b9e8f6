"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from opinion.domain.model.comment import Comment
from opinion.domain.value import ArticleId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments reference their parent by id only. Implementations keep an
    index from parent id to child ids so replies can be fetched without
    storing them on the parent record.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots_by_article(
        self,
        article_id: ArticleId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find root comments (depth 0) of an article, oldest first.

        Args:
            article_id: The article ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of root comments
        """
        pass

    @abstractmethod
    async def count_roots_by_article(self, article_id: ArticleId) -> int:
        """Count root comments of an article.

        Args:
            article_id: The article ID

        Returns:
            Number of root comments
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, List[Comment]]:
        """Find direct replies for a batch of parent comments.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Mapping of parent ID to its replies, oldest first. Every
            requested parent is present, with an empty list if it has no
            replies.
        """
        pass

    @abstractmethod
    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count all comments (roots and replies) of an article.

        Args:
            article_id: The article ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment together with its replies.

        Args:
            comment_id: The comment ID to delete
        """
        pass
