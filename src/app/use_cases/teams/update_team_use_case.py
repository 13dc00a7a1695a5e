from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .common import TEAM_NOT_FOUND, assemble_team, is_manager
from .dtos import TeamResponse


class UpdateTeamUseCase:
    """Rename / re-describe a team (owner or admin)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        team_id: UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Result[TeamResponse]:
        if name is not None:
            name = name.strip()
            if not name:
                return Return.err(Error("NAME_REQUIRED", "Team name is required"))

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            team = await self.uow.teams.get_active_by_id(team_id)
            if team is None:
                return Return.err(TEAM_NOT_FOUND)
            if not is_manager(team, user_id):
                return Return.err(
                    Error("NOT_AUTHORIZED", "Not authorized to update this team")
                )

            if name is not None:
                team.name = name
            if description is not None:
                team.description = description
            team.updated_at = utc_now()
            team = await self.uow.teams.update(team)

            response = await assemble_team(self.uow, team)
            await self.uow.commit()
            return Return.ok(response)
