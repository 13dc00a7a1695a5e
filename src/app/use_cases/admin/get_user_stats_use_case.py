from datetime import timedelta
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import UserRole

from .common import load_admin
from .dtos import UserStatsResponse

RECENT_WINDOW = timedelta(days=30)


class GetUserStatsUseCase:
    """Counts of active accounts by role and of those created in the last 30 days"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserStatsResponse]:
        async with self.uow:
            admin_result = await load_admin(self.uow, user_id)
            if admin_result.is_err():
                return Return.err(admin_result.error)

            users = self.uow.users
            return Return.ok(
                UserStatsResponse(
                    total_users=await users.count_active(),
                    admin_users=await users.count_active(role=UserRole.admin),
                    regular_users=await users.count_active(role=UserRole.user),
                    recent_users=await users.count_active(
                        created_since=utc_now() - RECENT_WINDOW
                    ),
                )
            )
