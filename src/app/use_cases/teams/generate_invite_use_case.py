"""
Generate Invite Link Use Case

Issues the shared "join this team" link.
"""

import secrets
from datetime import timedelta
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import email_templates
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .common import TEAM_NOT_FOUND, hash_invite_token, is_manager
from .dtos import InviteLinkResponse


class GenerateInviteUseCase:
    """
    Use case for generating a team invite link.

    Business Rules:
    - Owner or admin only
    - Random token; only its sha256 and expiry are stored on the team
    - Issuing a new link invalidates the previous one
    - The plaintext token is returned once and cannot be retrieved again
    """

    def __init__(self, uow: UnitOfWork, ttl_days: int = 7):
        self.uow = uow
        self.ttl_days = ttl_days

    async def execute(
        self, user_id: UUID, team_id: UUID
    ) -> Result[InviteLinkResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            team = await self.uow.teams.get_active_by_id(team_id)
            if team is None:
                return Return.err(TEAM_NOT_FOUND)
            if not is_manager(team, user_id):
                return Return.err(
                    Error("NOT_AUTHORIZED", "Not authorized to invite members")
                )

            token = secrets.token_hex(20)
            team.invite_token = hash_invite_token(token)
            team.invite_token_expire = utc_now() + timedelta(days=self.ttl_days)
            await self.uow.teams.update(team)
            await self.uow.commit()

            return Return.ok(
                InviteLinkResponse(
                    invite_token=token,
                    invite_url=email_templates.team_invite_link(token),
                    expires_at=team.invite_token_expire,
                )
            )
