"""Unit tests for the in-memory comment repository's parent index."""

import pytest

from opinion.persistence.repository.inmemory.comment import InMemoryCommentRepository
from tests.conftest import make_article, make_comment, make_user


class TestInMemoryCommentRepository:
    """Parent index and cascade behaviour."""

    @pytest.mark.asyncio
    async def test_find_replies_returns_entry_for_every_parent(self):
        """Parents without replies map to an empty list."""
        # Arrange
        repo = InMemoryCommentRepository()
        user = make_user()
        article = make_article(user)
        with_reply = await repo.save(make_comment(article, user))
        without_reply = await repo.save(make_comment(article, user, minutes=1))
        reply = await repo.save(make_comment(article, user, parent=with_reply))

        # Act
        replies = await repo.find_replies([with_reply.id, without_reply.id])

        # Assert
        assert [r.id for r in replies[with_reply.id]] == [reply.id]
        assert replies[without_reply.id] == []

    @pytest.mark.asyncio
    async def test_updating_reply_does_not_duplicate_index_entry(self):
        """Saving an existing reply again keeps a single index entry."""
        # Arrange
        repo = InMemoryCommentRepository()
        user = make_user()
        article = make_article(user)
        root = await repo.save(make_comment(article, user))
        reply = await repo.save(make_comment(article, user, parent=root))

        # Act
        await repo.save(reply.model_copy(update={"text": "edited", "altered": True}))

        # Assert
        replies = await repo.find_replies([root.id])
        assert len(replies[root.id]) == 1
        assert replies[root.id][0].text == "edited"

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self):
        # Arrange
        repo = InMemoryCommentRepository()
        user = make_user()
        article = make_article(user)
        root = await repo.save(make_comment(article, user))
        for i in range(3):
            await repo.save(make_comment(article, user, parent=root, minutes=i + 1))

        # Act
        await repo.delete(root.id)

        # Assert
        assert await repo.count_by_article(article.id) == 0
        assert await repo.find_replies([root.id]) == {root.id: []}

    @pytest.mark.asyncio
    async def test_delete_missing_comment_is_noop(self):
        repo = InMemoryCommentRepository()
        user = make_user()
        root = await repo.save(make_comment(make_article(user), user))

        await repo.delete(make_comment(make_article(user), user).id)

        assert await repo.find_by_id(root.id) is not None

    @pytest.mark.asyncio
    async def test_equal_timestamps_are_ordered_by_id(self):
        """Ties on created_at fall back to the comment id, as in PostgreSQL."""
        # Arrange
        repo = InMemoryCommentRepository()
        user = make_user()
        article = make_article(user)
        roots = [make_comment(article, user) for _ in range(4)]
        for root in reversed(sorted(roots, key=lambda c: c.id)):
            await repo.save(root)
        replies = [make_comment(article, user, parent=roots[0]) for _ in range(3)]
        for reply in reversed(sorted(replies, key=lambda c: c.id)):
            await repo.save(reply)

        # Act
        found_roots = await repo.find_roots_by_article(article.id)
        found_replies = await repo.find_replies([roots[0].id])

        # Assert
        assert [c.id for c in found_roots] == sorted(c.id for c in roots)
        assert [c.id for c in found_replies[roots[0].id]] == sorted(
            c.id for c in replies
        )
