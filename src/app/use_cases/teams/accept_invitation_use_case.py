from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import User

from .common import assemble_team, join_through_invitation
from .dtos import AcceptInvitationResponse
from .get_invitation_use_case import INVALID_INVITATION


class AcceptInvitationUseCase:
    """
    Use case for accepting an email invitation.

    Business Rules:
    - The invitation must be live (unaccepted, unexpired) and its team active
    - It must be addressed to the acting user's email (case-insensitive)
    - Already a member: the invitation is still consumed and the call succeeds
    - Otherwise the user joins with the invitation role; the owner gets
      team_joined and the new member team_invite
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, user_id: UUID, token: str
    ) -> Result[AcceptInvitationResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            actor = actor_result.value

            invitation = await self.uow.pending_invitations.get_live_by_token(
                token, utc_now()
            )
            if invitation is None:
                return Return.err(INVALID_INVITATION)

            if User.normalize_email(invitation.email) != User.normalize_email(
                actor.email
            ):
                return Return.err(
                    Error(
                        "EMAIL_MISMATCH",
                        "This invitation was sent to a different email address",
                    )
                )

            team = await self.uow.teams.get_active_by_id(invitation.team_id)
            if team is None:
                return Return.err(INVALID_INVITATION)

            joined = await join_through_invitation(
                self.uow,
                self.notifier,
                invitation,
                team,
                actor,
                owner_message=f"{actor.name} joined {team.name}",
                welcome=True,
            )

            response = await assemble_team(self.uow, team)
            await self.uow.commit()
            await self.notifier.deliver()

            if not joined:
                return Return.ok(
                    AcceptInvitationResponse(
                        message="You are already a member of this team",
                        already_member=True,
                        team=response,
                    )
                )
            return Return.ok(
                AcceptInvitationResponse(
                    message="Invitation accepted successfully",
                    already_member=False,
                    team=response,
                )
            )
