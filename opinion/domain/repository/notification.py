"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from opinion.domain.model.notification import Notification
from opinion.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Notification]:
        """Find notifications addressed to a user, newest first.

        Args:
            recipient_id: The recipient's user ID
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        pass
