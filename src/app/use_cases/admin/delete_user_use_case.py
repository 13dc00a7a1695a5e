import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .common import load_admin

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Permanently delete an account (admin only, never one's own).

    Tasks, memberships and log rows that reference the user are left as is.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, target_id: UUID) -> Result[None]:
        async with self.uow:
            admin_result = await load_admin(self.uow, user_id)
            if admin_result.is_err():
                return Return.err(admin_result.error)

            user = await self.uow.users.get_by_id(target_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            if user.id == user_id:
                return Return.err(
                    Error("CANNOT_MODIFY_SELF", "You cannot delete your own account")
                )

            await self.uow.users.delete(user)
            await self.uow.commit()

        logger.info(f"User {target_id} permanently deleted by admin {user_id}")
        return Return.ok()
