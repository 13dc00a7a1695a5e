from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .dtos import NotificationResponse

NOTIFICATION_NOT_FOUND = Error("NOTIFICATION_NOT_FOUND", "Notification not found")


class MarkNotificationReadUseCase:
    """
    Mark one of the user's notifications read (read_at set once).

    The lookup is scoped to the user, so someone else's notification is
    reported exactly like a missing one.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, notification_id: UUID
    ) -> Result[NotificationResponse]:
        async with self.uow:
            notification = await self.uow.notifications.get_for_user(
                notification_id, user_id
            )
            if notification is None:
                return Return.err(NOTIFICATION_NOT_FOUND)

            if not notification.read:
                notification.mark_read(utc_now())
                notification = await self.uow.notifications.update(notification)
                await self.uow.commit()

            return Return.ok(NotificationResponse.from_entity(notification))
