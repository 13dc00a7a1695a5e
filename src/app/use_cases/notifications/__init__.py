"""
Notification Use Cases

Read-state API over a user's own notifications. Creation happens through
NotificationDispatcher as a side effect of other use cases.
"""

from .delete_all_notifications_use_case import DeleteAllNotificationsUseCase
from .delete_notification_use_case import DeleteNotificationUseCase
from .dtos import (
    BulkNotificationResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from .get_unread_count_use_case import GetUnreadCountUseCase
from .list_notifications_use_case import ListNotificationsUseCase
from .mark_all_read_use_case import MarkAllReadUseCase
from .mark_notification_read_use_case import MarkNotificationReadUseCase

__all__ = [
    "ListNotificationsUseCase",
    "GetUnreadCountUseCase",
    "MarkNotificationReadUseCase",
    "MarkAllReadUseCase",
    "DeleteNotificationUseCase",
    "DeleteAllNotificationsUseCase",
    "NotificationResponse",
    "NotificationListResponse",
    "UnreadCountResponse",
    "BulkNotificationResponse",
]
