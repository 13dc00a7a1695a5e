from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserRole


async def load_admin(uow: UnitOfWork, user_id: UUID) -> Result[User]:
    """Acting user, who must hold the global admin role"""
    actor_result = await load_actor(uow, user_id)
    if actor_result.is_err():
        return Return.err(actor_result.error)
    if actor_result.value.role != UserRole.admin:
        return Return.err(Error("ADMIN_REQUIRED", "Admin access required"))
    return actor_result
