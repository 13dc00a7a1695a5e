from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork

from .dtos import MeResponse


class GetMeUseCase:
    """Profile of the user behind the token."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[MeResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            return Return.ok(MeResponse.from_entity(actor_result.value))
