"""
Notification Dispatcher

Persists in-app notifications inside the caller's unit of work and, once the
caller has committed, pushes them over the real-time channel and sends any
companion email. Push and email are best effort: failures are logged and
never undo the stored notification.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from src.app.errors import DependencyFailure
from src.app.services.email_sender import EmailMessage, EmailSender, send_best_effort
from src.app.services.realtime_publisher import RealtimePublisher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notifications.dtos import NotificationResponse
from src.domain.entities import Notification, NotificationType

logger = logging.getLogger(__name__)

NOTIFICATION_EVENT = "notification"


@dataclass
class _Outgoing:
    notification: Notification
    email: Optional[EmailMessage] = None


class NotificationDispatcher:
    """
    Usage inside a use case:

        async with self.uow:
            ...
            await self.notifier.notify(user_id, NotificationType.task_assigned, ...)
            await self.uow.commit()
            await self.notifier.deliver()
    """

    def __init__(
        self,
        uow: UnitOfWork,
        publisher: RealtimePublisher,
        email_sender: EmailSender,
    ):
        self.uow = uow
        self.publisher = publisher
        self.email_sender = email_sender
        self._outbox: List[_Outgoing] = []

    async def notify(
        self,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_task_id: Optional[UUID] = None,
        related_team_id: Optional[UUID] = None,
        email: Optional[EmailMessage] = None,
    ) -> Notification:
        """Store an unread notification and queue its delivery"""
        notification = Notification(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            related_task_id=related_task_id,
            related_team_id=related_team_id,
        )
        notification = await self.uow.notifications.create(notification)
        self._outbox.append(_Outgoing(notification=notification, email=email))
        return notification

    @property
    def pending(self) -> int:
        return len(self._outbox)

    def discard(self) -> None:
        """Drop queued deliveries (the caller rolled back)"""
        self._outbox = []

    async def deliver(self) -> None:
        """Push queued notifications, then send companion emails. Call after commit."""
        outgoing, self._outbox = self._outbox, []

        for item in outgoing:
            await self._publish(item.notification)

        emailed = False
        for item in outgoing:
            if item.email is None:
                continue
            if await send_best_effort(self.email_sender, item.email):
                item.notification.email_sent = True
                await self.uow.notifications.update(item.notification)
                emailed = True

        if emailed:
            await self.uow.commit()

    async def _publish(self, notification: Notification) -> None:
        payload = NotificationResponse.from_entity(notification).model_dump(
            by_alias=True, mode="json"
        )
        try:
            await self.publisher.publish(
                str(notification.user_id), NOTIFICATION_EVENT, payload
            )
        except DependencyFailure as exc:
            logger.warning(
                f"Real-time delivery of notification {notification.id} failed: {exc}"
            )
