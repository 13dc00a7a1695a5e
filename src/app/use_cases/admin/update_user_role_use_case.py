from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import UserRole

from .common import load_admin
from .dtos import AdminUserResponse


class UpdateUserRoleUseCase:
    """
    Change a user's global role.

    Business Rules:
    - Admin only
    - Role is user or admin
    - An admin cannot change their own role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, target_id: UUID, role: str
    ) -> Result[AdminUserResponse]:
        try:
            new_role = UserRole(role)
        except ValueError:
            return Return.err(
                Error("INVALID_ROLE", 'Invalid role. Must be "user" or "admin"')
            )

        async with self.uow:
            admin_result = await load_admin(self.uow, user_id)
            if admin_result.is_err():
                return Return.err(admin_result.error)

            user = await self.uow.users.get_by_id(target_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            if user.id == user_id:
                return Return.err(
                    Error("CANNOT_MODIFY_SELF", "You cannot change your own role")
                )

            user.role = new_role
            user.updated_at = utc_now()
            user = await self.uow.users.update(user)
            await self.uow.commit()
            return Return.ok(AdminUserResponse.from_entity(user))
