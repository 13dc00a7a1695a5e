from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_repository import INotificationRepository
from src.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def get_for_user(
        self, notification_id: UUID, user_id: UUID
    ) -> Optional[Notification]:
        """Get a notification by ID among the ones addressed to user_id"""
        stmt = select(Notification).where(
            Notification.id == notification_id, Notification.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_user(
        self, user_id: UUID, read: Optional[bool] = None, limit: int = 50
    ) -> List[Notification]:
        """Notifications of a user, newest first"""
        stmt = select(Notification).where(Notification.user_id == user_id)
        if read is not None:
            stmt = stmt.where(Notification.read == read)
        stmt = stmt.order_by(Notification.created_at.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_unread(self, user_id: UUID) -> int:
        """Unread notifications of a user"""
        stmt = (
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id, Notification.read == False)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def mark_all_read(self, user_id: UUID, now: datetime) -> int:
        """Flag every unread notification of a user as read"""
        stmt = select(Notification).where(
            Notification.user_id == user_id, Notification.read == False
        )
        result = await self.session.exec(stmt)
        unread = list(result.all())
        for notification in unread:
            notification.mark_read(now)
            self.session.add(notification)
        await self.session.flush()
        return len(unread)

    async def delete(self, notification: Notification) -> None:
        """Delete one notification"""
        await self.session.delete(notification)
        await self.session.flush()

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every notification of a user"""
        stmt = select(Notification).where(Notification.user_id == user_id)
        result = await self.session.exec(stmt)
        notifications = list(result.all())
        for notification in notifications:
            await self.session.delete(notification)
        await self.session.flush()
        return len(notifications)
