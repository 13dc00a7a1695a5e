from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork

from .common import TEAM_NOT_FOUND, assemble_team
from .dtos import TeamResponse


class GetTeamUseCase:
    """One active team; non-members get TEAM_NOT_FOUND, as if it did not exist"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, team_id: UUID) -> Result[TeamResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            team = await self.uow.teams.get_active_by_id(team_id)
            if team is None or not team.is_member(user_id):
                return Return.err(TEAM_NOT_FOUND)

            return Return.ok(await assemble_team(self.uow, team))
