"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from opinion.domain.model import Comment
from opinion.domain.repository import CommentRepository
from opinion.domain.value import ArticleId, CommentId
from opinion.persistence.mappers import comment_to_dict, row_to_comment
from opinion.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_roots_by_article(
        self,
        article_id: ArticleId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find root comments of an article, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_roots_by_article(self, article_id: ArticleId) -> int:
        """Count root comments of an article."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.article_id == article_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, List[Comment]]:
        """Find direct replies for a batch of parents in one query."""
        replies: dict[CommentId, List[Comment]] = {pid: [] for pid in parent_ids}
        if not parent_ids:
            return replies

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(list(parent_ids)))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        for row in result.mappings().all():
            reply = row_to_comment(dict(row))
            replies[reply.parent_id].append(reply)
        return replies

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count all comments of an article."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; replies go with it via ON DELETE CASCADE."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
