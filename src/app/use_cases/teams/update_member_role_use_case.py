from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import TeamRole

from .add_member_use_case import ASSIGNABLE_ROLES
from .common import TEAM_NOT_FOUND, assemble_team
from .dtos import TeamResponse


class UpdateMemberRoleUseCase:
    """
    Change a member's team role.

    Business Rules:
    - Owner only
    - The owner's own membership keeps role owner
    - New role is admin or member
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, team_id: UUID, member_id: UUID, role: str
    ) -> Result[TeamResponse]:
        try:
            team_role = TeamRole(role)
        except ValueError:
            team_role = None
        if team_role not in ASSIGNABLE_ROLES:
            return Return.err(
                Error("INVALID_ROLE", 'Invalid role. Must be "admin" or "member"')
            )

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            team = await self.uow.teams.get_active_by_id(team_id)
            if team is None:
                return Return.err(TEAM_NOT_FOUND)
            if team.owner_id != user_id:
                return Return.err(
                    Error("NOT_AUTHORIZED", "Only team owner can update member roles")
                )
            if member_id == team.owner_id:
                return Return.err(
                    Error("CANNOT_CHANGE_OWNER_ROLE", "Cannot change owner role")
                )

            member = team.find_member(member_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            member.role = team_role
            team.updated_at = utc_now()
            team = await self.uow.teams.update(team)

            response = await assemble_team(self.uow, team)
            await self.uow.commit()
            return Return.ok(response)
