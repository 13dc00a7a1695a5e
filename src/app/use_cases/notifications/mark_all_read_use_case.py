from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .dtos import BulkNotificationResponse


class MarkAllReadUseCase:
    """Bulk flag every unread notification of the user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[BulkNotificationResponse]:
        async with self.uow:
            affected = await self.uow.notifications.mark_all_read(user_id, utc_now())
            await self.uow.commit()
            return Return.ok(BulkNotificationResponse(affected=affected))
