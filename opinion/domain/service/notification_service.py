"""Notification domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from opinion.domain.error import NoAccessError, NotFoundError
from opinion.domain.model import Notification
from opinion.domain.repository import NotificationRepository
from opinion.domain.value import NotificationId, PendingNotification, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for recording and reading user notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self, title: str, content: str, recipient_id: UserId
    ) -> Notification:
        """Record a notification for a user.

        Args:
            title: Short title
            content: HTML body
            recipient_id: Receiving user

        Returns:
            The saved notification
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            title=title,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                title=title,
                content=content,
                is_read=False,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification recorded",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )
            return saved

    async def dispatch(self, pending: Sequence[PendingNotification]) -> int:
        """Deliver pending notifications, best effort.

        A failure for one entry is logged and the remaining entries are
        still delivered.

        Args:
            pending: Notifications returned by another domain service

        Returns:
            Number of notifications delivered
        """
        with logfire.span("notification_service.dispatch", pending=len(pending)):
            delivered = 0
            for item in pending:
                try:
                    await self.notify(item.title, item.content, item.recipient_id)
                except Exception as e:
                    logfire.warn(
                        "Notification dispatch failed",
                        recipient_id=str(item.recipient_id),
                        title=item.title,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    continue
                delivered += 1
            logfire.info(
                "Notifications dispatched", delivered=delivered, pending=len(pending)
            )
            return delivered

    async def list_for_user(
        self, user_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Notification]:
        """Get a user's notifications, newest first."""
        with logfire.span("notification_service.list_for_user", user_id=str(user_id)):
            return await self.notification_repository.find_by_recipient(
                user_id, limit=limit, offset=offset
            )

    async def mark_as_read(
        self, notification_id: NotificationId, requester_id: UserId
    ) -> Notification:
        """Mark a notification as read.

        Args:
            notification_id: Notification ID
            requester_id: User asking for the change

        Returns:
            Updated notification

        Raises:
            NotFoundError: If the notification does not exist
            NoAccessError: If the requester is not the recipient
        """
        with logfire.span(
            "notification_service.mark_as_read",
            notification_id=str(notification_id),
            requester_id=str(requester_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if notification is None:
                raise NotFoundError("Notification", str(notification_id))
            if notification.recipient_id != requester_id:
                raise NoAccessError(
                    "notification", str(notification_id), str(requester_id), "read"
                )
            if notification.is_read:
                return notification

            updated = notification.model_copy(update={"is_read": True})
            return await self.notification_repository.save(updated)
