"""Mark notification read use case."""

from uuid import UUID

from pydantic import BaseModel

from opinion.domain.service import NotificationService
from opinion.domain.value import NotificationId, UserId

from .list_notifications import NotificationItem


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str  # UUID string
    user_id: str  # Current user ID (must be the recipient)


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationItem:
        """Mark the notification read.

        Raises:
            NotFoundError: If the notification does not exist
            NoAccessError: If the user is not the recipient
        """
        notification = await self.notification_service.mark_as_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return NotificationItem.from_notification(notification)
