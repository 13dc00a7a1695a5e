from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .mark_notification_read_use_case import NOTIFICATION_NOT_FOUND


class DeleteNotificationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, notification_id: UUID) -> Result[None]:
        async with self.uow:
            notification = await self.uow.notifications.get_for_user(
                notification_id, user_id
            )
            if notification is None:
                return Return.err(NOTIFICATION_NOT_FOUND)

            await self.uow.notifications.delete(notification)
            await self.uow.commit()
            return Return.ok()
