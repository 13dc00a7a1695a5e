from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import BulkNotificationResponse


class DeleteAllNotificationsUseCase:
    """Delete every notification of the user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[BulkNotificationResponse]:
        async with self.uow:
            affected = await self.uow.notifications.delete_all_for_user(user_id)
            await self.uow.commit()
            return Return.ok(BulkNotificationResponse(affected=affected))
