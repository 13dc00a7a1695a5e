from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .common import TEAM_NOT_FOUND


class DeleteTeamUseCase:
    """
    Soft delete a team (owner only).

    The row stays with is_active=False; its tasks become unreachable through
    the team but are not removed.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, team_id: UUID) -> Result[None]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            team = await self.uow.teams.get_active_by_id(team_id)
            if team is None:
                return Return.err(TEAM_NOT_FOUND)
            if team.owner_id != user_id:
                return Return.err(
                    Error("NOT_AUTHORIZED", "Not authorized to delete this team")
                )

            team.is_active = False
            team.updated_at = utc_now()
            await self.uow.teams.update(team)
            await self.uow.commit()
            return Return.ok()
