from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer.

    Bulk operations are always scoped to one recipient.
    """

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def get_for_user(
        self, notification_id: UUID, user_id: UUID
    ) -> Optional[Notification]:
        """Get a notification by ID among the ones addressed to user_id"""
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: UUID, read: Optional[bool] = None, limit: int = 50
    ) -> List[Notification]:
        """Notifications of a user, newest first"""
        pass

    @abstractmethod
    async def count_unread(self, user_id: UUID) -> int:
        """Unread notifications of a user"""
        pass

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID, now: datetime) -> int:
        """Flag every unread notification of a user as read"""
        pass

    @abstractmethod
    async def delete(self, notification: Notification) -> None:
        """Delete one notification"""
        pass

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every notification of a user"""
        pass
