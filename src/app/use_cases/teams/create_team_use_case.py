from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Team

from .common import assemble_team
from .dtos import TeamResponse


class CreateTeamUseCase:
    """
    Create a team owned by the acting user.

    The owner membership is created by Team.create itself.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, name: str, description: Optional[str] = None
    ) -> Result[TeamResponse]:
        name = (name or "").strip()
        if not name:
            return Return.err(Error("NAME_REQUIRED", "Team name is required"))

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            team = Team.create(name=name, owner_id=user_id, description=description)
            team = await self.uow.teams.create(team)

            response = await assemble_team(self.uow, team)
            await self.uow.commit()
            return Return.ok(response)
