"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from opinion.domain.model.comment import Comment
from opinion.domain.repository.comment import CommentRepository
from opinion.domain.value import ArticleId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Comments are kept in a dict keyed by id; ``_children`` indexes parent id
    to child ids in insertion order.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._children: dict[CommentId, list[CommentId]] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_roots_by_article(
        self,
        article_id: ArticleId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find root comments of an article, oldest first."""
        roots = [
            c
            for c in self._comments.values()
            if c.article_id == article_id and c.parent_id is None
        ]
        roots.sort(key=lambda c: (c.created_at, c.id))
        return roots[offset : offset + limit]

    async def count_roots_by_article(self, article_id: ArticleId) -> int:
        """Count root comments of an article."""
        return sum(
            1
            for c in self._comments.values()
            if c.article_id == article_id and c.parent_id is None
        )

    async def find_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[Comment]]:
        """Find direct replies for a batch of parents."""
        replies = {}
        for parent_id in parent_ids:
            children = [self._comments[cid] for cid in self._children.get(parent_id, [])]
            children.sort(key=lambda c: (c.created_at, c.id))
            replies[parent_id] = children
        return replies

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count all comments of an article."""
        return sum(1 for c in self._comments.values() if c.article_id == article_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        is_new = comment.id not in self._comments
        self._comments[comment.id] = comment
        if is_new and comment.parent_id is not None:
            self._children.setdefault(comment.parent_id, []).append(comment.id)
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and, recursively, its replies."""
        comment = self._comments.pop(comment_id, None)
        if comment is None:
            return

        for child_id in self._children.pop(comment_id, []):
            await self.delete(child_id)

        if comment.parent_id is not None:
            siblings = self._children.get(comment.parent_id)
            if siblings and comment_id in siblings:
                siblings.remove(comment_id)
