from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork

from .common import assemble_team
from .dtos import TeamListResponse


class ListTeamsUseCase:
    """Active teams the user belongs to, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[TeamListResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            teams = await self.uow.teams.list_active_for_user(user_id)
            items = [await assemble_team(self.uow, team) for team in teams]
            return Return.ok(TeamListResponse(count=len(items), teams=items))
