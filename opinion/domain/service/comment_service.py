"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError

from opinion.config import APISettings
from opinion.domain.error import NoAccessError, NotFoundError
from opinion.domain.model import (
    Article,
    Comment,
    CommentCreated,
    CommentPage,
    CommentThread,
    User,
)
from opinion.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from opinion.domain.value import (
    ArticleId,
    CommentId,
    Nickname,
    PendingNotification,
)

from .base import Service
from .mention import extract_mentions
from .nesting import check_nesting_level
from .notification_content import (
    COMMENT_NOTIFICATION_TITLE,
    COMMENT_TEMPLATE,
    MENTION_NOTIFICATION_TITLE,
    MENTION_TEMPLATE,
    render,
)


class CommentService(Service):
    """Domain service for comment operations.

    Creation returns the pending notifications instead of sending them; the
    caller dispatches them once the comment is stored.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        user_repository: UserRepository,
        api_settings: APISettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository (existence checks, article author)
            user_repository: User repository (mention resolution)
            api_settings: API settings, provides the base URL for notification links
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository
        self.user_repository = user_repository
        self.base_url = api_settings.base_url

    async def list_root_comments(
        self, article_id: ArticleId, page: int, size: int
    ) -> CommentPage:
        """Get a page of root comments of an article with their replies.

        Args:
            article_id: Article ID
            page: Zero-based page number
            size: Root comments per page

        Returns:
            Page of comment threads, oldest root first

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span(
            "comment_service.list_root_comments",
            article_id=str(article_id),
            page=page,
            size=size,
        ):
            await self._get_article(article_id)

            roots = await self.comment_repository.find_roots_by_article(
                article_id, limit=size, offset=page * size
            )
            total = await self.comment_repository.count_roots_by_article(article_id)
            replies = await self.comment_repository.find_replies(
                [root.id for root in roots]
            )

            threads = [
                CommentThread(comment=root, replies=replies.get(root.id, []))
                for root in roots
            ]
            logfire.info(
                "Root comments retrieved",
                article_id=str(article_id),
                count=len(threads),
                total=total,
            )
            return CommentPage(items=threads, page=page, size=size, total=total)

    async def create_comment(
        self, article_id: ArticleId, text: str, author: User
    ) -> CommentCreated:
        """Create a root comment on an article.

        Every resolvable ``@nickname`` in the text produces a mention
        notification, and the article author always gets one notification
        about the new comment.

        Args:
            article_id: Article ID
            text: Comment text
            author: Commenting user

        Returns:
            The saved comment and the notifications to dispatch

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            author_id=str(author.id),
        ):
            article = await self._get_article(article_id)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article.id,
                author_id=author.id,
                author_nickname=author.nickname,
                text=text,
                parent_id=None,
                depth=0,
                altered=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            notifications = await self._mention_notifications(text, author, article)
            notifications.append(
                PendingNotification(
                    recipient_id=article.author_id,
                    title=COMMENT_NOTIFICATION_TITLE,
                    content=render(
                        COMMENT_TEMPLATE, self.base_url, author.nickname, article.id
                    ),
                )
            )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id),
                author_nickname=author.nickname.root,
                notifications=len(notifications),
            )
            return CommentCreated(comment=saved, notifications=notifications)

    async def reply_to_comment(
        self, parent_id: CommentId, text: str, author: User
    ) -> CommentCreated:
        """Reply to a root comment.

        Args:
            parent_id: Comment being replied to
            text: Reply text
            author: Replying user

        Returns:
            The saved reply (no notifications are produced for replies)

        Raises:
            NotFoundError: If the parent comment does not exist
            ExceedsNestingLevelError: If the parent is itself a reply
        """
        with logfire.span(
            "comment_service.reply_to_comment",
            parent_id=str(parent_id),
            author_id=str(author.id),
        ):
            parent = await self._get_comment(parent_id)
            check_nesting_level(parent)

            now = datetime.now()
            reply = Comment(
                id=CommentId(uuid4()),
                article_id=parent.article_id,
                author_id=author.id,
                author_nickname=author.nickname,
                text=text,
                parent_id=parent.id,
                depth=parent.depth + 1,
                altered=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(reply)
            logfire.info(
                "Reply created",
                comment_id=str(saved.id),
                parent_id=str(parent_id),
                article_id=str(saved.article_id),
                depth=saved.depth,
            )
            return CommentCreated(comment=saved)

    async def update_comment(
        self, comment_id: CommentId, text: str, requester: User
    ) -> Comment:
        """Replace the text of a comment.

        Args:
            comment_id: Comment ID
            text: New text
            requester: User asking for the change

        Returns:
            Updated comment, marked as altered

        Raises:
            NotFoundError: If the comment does not exist
            NoAccessError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            requester_id=str(requester.id),
            text_length=len(text),
        ):
            comment = await self._get_comment(comment_id)
            self._check_author(comment, requester, "edit")

            # Validate through the model so text length rules apply
            updated = Comment.model_validate(
                {
                    **comment.model_dump(),
                    "text": text,
                    "altered": True,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment text updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(self, comment_id: CommentId, requester: User) -> None:
        """Delete a comment and its replies.

        Args:
            comment_id: Comment ID
            requester: User asking for the deletion

        Raises:
            NotFoundError: If the comment does not exist
            NoAccessError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester.id),
        ):
            comment = await self._get_comment(comment_id)
            self._check_author(comment, requester, "delete")

            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                article_id=str(comment.article_id),
            )

    async def count_comments(self, article_id: ArticleId) -> int:
        """Count all comments (roots and replies) of an article."""
        with logfire.span(
            "comment_service.count_comments", article_id=str(article_id)
        ):
            return await self.comment_repository.count_by_article(article_id)

    async def _get_article(self, article_id: ArticleId) -> Article:
        article = await self.article_repository.find_by_id(article_id)
        if article is None:
            logfire.warn("Article not found", article_id=str(article_id))
            raise NotFoundError("Article", str(article_id))
        return article

    async def _get_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    @staticmethod
    def _check_author(comment: Comment, requester: User, action: str) -> None:
        if comment.author_id != requester.id:
            logfire.warn(
                "Comment access denied",
                comment_id=str(comment.id),
                author_id=str(comment.author_id),
                requester_id=str(requester.id),
                action=action,
            )
            raise NoAccessError("comment", str(comment.id), str(requester.id), action)

    async def _mention_notifications(
        self, text: str, author: User, article: Article
    ) -> list[PendingNotification]:
        """Build one mention notification per resolvable ``@handle`` occurrence."""
        content = render(MENTION_TEMPLATE, self.base_url, author.nickname, article.id)
        notifications = []
        for handle in extract_mentions(text):
            mentioned = await self._find_user_by_handle(handle)
            if mentioned is None:
                continue
            notifications.append(
                PendingNotification(
                    recipient_id=mentioned.id,
                    title=MENTION_NOTIFICATION_TITLE,
                    content=content,
                )
            )
        return notifications

    async def _find_user_by_handle(self, handle: str) -> Optional[User]:
        try:
            nickname = Nickname(handle)
        except ValidationError:
            # Longer than any stored nickname
            return None
        return await self.user_repository.find_by_nickname(nickname)
