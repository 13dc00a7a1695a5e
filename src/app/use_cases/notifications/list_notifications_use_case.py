from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import NotificationListResponse, NotificationResponse

DEFAULT_LIMIT = 50
MAX_LIMIT = 200


class ListNotificationsUseCase:
    """The user's own notifications, newest first, with the unread total"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, read: Optional[bool] = None, limit: int = DEFAULT_LIMIT
    ) -> Result[NotificationListResponse]:
        limit = max(1, min(limit or DEFAULT_LIMIT, MAX_LIMIT))
        async with self.uow:
            notifications = await self.uow.notifications.list_for_user(
                user_id, read=read, limit=limit
            )
            unread = await self.uow.notifications.count_unread(user_id)
            return Return.ok(
                NotificationListResponse(
                    notifications=[
                        NotificationResponse.from_entity(n) for n in notifications
                    ],
                    unread_count=unread,
                )
            )
