from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User


async def load_actor(uow: UnitOfWork, user_id: UUID) -> Result[User]:
    """
    Load the acting user behind a verified token.

    Must be called inside an open unit of work.
    """
    user = await uow.users.get_by_id(user_id)
    if user is None:
        return Return.err(Error("UNAUTHENTICATED", "User not found"))
    if not user.is_active:
        return Return.err(
            Error("ACCOUNT_DISABLED", "Your account has been deactivated")
        )
    return Return.ok(user)
