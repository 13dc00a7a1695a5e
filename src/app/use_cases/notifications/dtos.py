"""
Notification Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.use_cases.schema import CamelModel
from src.domain.entities import Notification


class NotificationResponse(CamelModel):
    """Notification as shown to its recipient and pushed over the socket"""

    id: UUID
    user: UUID
    type: str
    title: str
    message: str
    related_task: Optional[UUID] = None
    related_team: Optional[UUID] = None
    read: bool
    read_at: Optional[datetime] = None
    email_sent: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=notification.id,
            user=notification.user_id,
            type=notification.type.value,
            title=notification.title,
            message=notification.message,
            related_task=notification.related_task_id,
            related_team=notification.related_team_id,
            read=notification.read,
            read_at=notification.read_at,
            email_sent=notification.email_sent,
            created_at=notification.created_at,
        )


class NotificationListResponse(CamelModel):
    notifications: List[NotificationResponse]
    unread_count: int


class UnreadCountResponse(CamelModel):
    count: int


class BulkNotificationResponse(CamelModel):
    """Outcome of mark-all-read / delete-all"""

    affected: int
