from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import NotificationType, TeamRole

from .common import assemble_team, hash_invite_token
from .dtos import TeamResponse


class JoinTeamUseCase:
    """
    Join a team through its shared invite link.

    Business Rules:
    - The token is hashed and matched against an active team whose link has
      not expired
    - Joins as `member`; existing members get ALREADY_MEMBER
    - The owner is notified (team_joined)
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, user_id: UUID, token: str) -> Result[TeamResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            actor = actor_result.value

            team = await self.uow.teams.get_by_invite_token_hash(
                hash_invite_token(token), utc_now()
            )
            if team is None:
                return Return.err(
                    Error("INVALID_INVITE_TOKEN", "Invalid or expired invite token")
                )
            if team.is_member(actor.id):
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this team")
                )

            team.add_member(actor.id, TeamRole.member)
            team.updated_at = utc_now()
            team = await self.uow.teams.update(team)

            await self.notifier.notify(
                team.owner_id,
                NotificationType.team_joined,
                "New Team Member",
                f"{actor.name} joined {team.name}",
                related_team_id=team.id,
            )

            response = await assemble_team(self.uow, team)
            await self.uow.commit()
            await self.notifier.deliver()
            return Return.ok(response)
