from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.schema import UserSummary
from src.domain.base import utc_now

from .dtos import InvitationDetailsResponse, InvitedTeam

INVALID_INVITATION = Error(
    "INVALID_INVITATION_TOKEN", "Invalid or expired invitation token"
)


class GetInvitationUseCase:
    """
    Public lookup of a pending invitation by its token.

    Used by the invite landing page before the addressee signs in.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[InvitationDetailsResponse]:
        async with self.uow:
            invitation = await self.uow.pending_invitations.get_live_by_token(
                token, utc_now()
            )
            if invitation is None:
                return Return.err(INVALID_INVITATION)

            team = await self.uow.teams.get_active_by_id(invitation.team_id)
            if team is None:
                return Return.err(INVALID_INVITATION)
            inviter = await self.uow.users.get_by_id(invitation.invited_by)

            return Return.ok(
                InvitationDetailsResponse(
                    email=invitation.email,
                    team=InvitedTeam(
                        id=team.id, name=team.name, description=team.description
                    ),
                    invited_by=UserSummary.from_entity(inviter) if inviter else None,
                    expires_at=invitation.expires_at,
                )
            )
