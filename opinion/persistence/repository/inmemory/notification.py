"""In-memory notification repository for testing."""

from typing import Optional

from opinion.domain.model.notification import Notification
from opinion.domain.repository.notification import NotificationRepository
from opinion.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """Find notifications addressed to a user, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        # Reverse insertion order first so equal timestamps stay newest first
        notifications.reverse()
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def save(self, notification: Notification) -> Notification:
        """Save or update a notification."""
        self._notifications[notification.id] = notification
        return notification
