"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from opinion.domain.model import Notification
from opinion.domain.repository import NotificationRepository
from opinion.domain.value import NotificationId, UserId
from opinion.persistence.mappers import notification_to_dict, row_to_notification
from opinion.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Notification]:
        """Find notifications addressed to a user, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update).

        The write runs inside a SAVEPOINT: a failed insert is rolled back on
        its own and the request transaction, including the comment that
        triggered the notification, stays usable.
        """
        notification_dict = notification_to_dict(notification)

        async with self.session.begin_nested():
            existing = await self.find_by_id(notification.id)
            if existing:
                stmt = (
                    notifications_table.update()
                    .where(notifications_table.c.id == notification.id)
                    .values(**notification_dict)
                )
            else:
                stmt = notifications_table.insert().values(**notification_dict)

            await self.session.execute(stmt)
        return notification
