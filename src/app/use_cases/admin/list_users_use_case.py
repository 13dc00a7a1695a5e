from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .common import load_admin
from .dtos import AdminUserResponse, UserListResponse


class ListUsersUseCase:
    """All accounts, newest first (admin only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserListResponse]:
        async with self.uow:
            admin_result = await load_admin(self.uow, user_id)
            if admin_result.is_err():
                return Return.err(admin_result.error)

            users = await self.uow.users.list_all()
            return Return.ok(
                UserListResponse(
                    count=len(users),
                    users=[AdminUserResponse.from_entity(u) for u in users],
                )
            )
