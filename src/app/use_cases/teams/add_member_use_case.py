"""
Add Member Use Case

Adds an existing user to a team, or invites an email address that has no
account yet.
"""

import logging
import secrets
from datetime import timedelta
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import DependencyFailure
from src.app.services import email_templates
from src.app.services.email_sender import EmailSender
from src.app.services.identity import load_actor
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import NotificationType, PendingInvitation, TeamRole, User

from .common import TEAM_NOT_FOUND, assemble_team, is_manager
from .dtos import AddMemberResponse, PendingInvitationResponse

logger = logging.getLogger(__name__)

ASSIGNABLE_ROLES = (TeamRole.admin, TeamRole.member)


class AddMemberUseCase:
    """
    Use case for adding a member by email.

    Business Rules:
    - Owner or admin only; role must be admin or member
    - Registered user: ALREADY_MEMBER if present, otherwise added right away,
      notified (team_invite) and mailed best effort
    - Unknown email: one live invitation per (email, team). The invitation is
      committed and then the invite email is sent; if the email cannot be
      delivered the invitation is deleted again and EMAIL_DELIVERY_FAILED is
      returned
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: NotificationDispatcher,
        email_sender: EmailSender,
        ttl_days: int = 7,
    ):
        self.uow = uow
        self.notifier = notifier
        self.email_sender = email_sender
        self.ttl_days = ttl_days

    async def execute(
        self,
        user_id: UUID,
        team_id: UUID,
        email: str,
        role: str = TeamRole.member.value,
    ) -> Result[AddMemberResponse]:
        email = User.normalize_email(email or "")
        if not email:
            return Return.err(Error("EMAIL_REQUIRED", "Email is required"))
        try:
            team_role = TeamRole(role or TeamRole.member.value)
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
            actor = actor_result.value

            team = await self.uow.teams.get_active_by_id(team_id)
            if team is None:
                return Return.err(TEAM_NOT_FOUND)
            if not is_manager(team, actor.id):
                return Return.err(
                    Error("NOT_AUTHORIZED", "Not authorized to add members")
                )

            user = await self.uow.users.get_by_email(email)
            if user is not None:
                if team.is_member(user.id):
                    return Return.err(
                        Error(
                            "ALREADY_MEMBER", "User is already a member of this team"
                        )
                    )

                team.add_member(user.id, team_role)
                team.updated_at = utc_now()
                team = await self.uow.teams.update(team)

                await self.notifier.notify(
                    user.id,
                    NotificationType.team_invite,
                    "You were added to a team",
                    f"You were added to {team.name}",
                    related_team_id=team.id,
                    email=email_templates.added_to_team_email(team, user, actor),
                )

                response = await assemble_team(self.uow, team)
                await self.uow.commit()
                await self.notifier.deliver()
                return Return.ok(
                    AddMemberResponse(message="Member added successfully", team=response)
                )

            now = utc_now()
            existing = await self.uow.pending_invitations.get_live_by_team_and_email(
                team.id, email, now
            )
            if existing is not None:
                return Return.err(
                    Error(
                        "ALREADY_INVITED",
                        "An invitation has already been sent to this email",
                    )
                )

            token = secrets.token_hex(32)
            invitation = PendingInvitation(
                email=email,
                team_id=team.id,
                role=team_role,
                invited_by=actor.id,
                invite_token=token,
                expires_at=now + timedelta(days=self.ttl_days),
            )
            invitation = await self.uow.pending_invitations.create(invitation)
            await self.uow.commit()

            message = email_templates.pending_invitation_email(
                team, email, token, actor, self.ttl_days
            )
            try:
                await self.email_sender.send(message)
            except DependencyFailure as exc:
                logger.error(
                    f"Invitation email to {email} for team {team.id} failed: {exc}"
                )
                await self.uow.pending_invitations.delete(invitation)
                await self.uow.commit()
                return Return.err(
                    Error(
                        "EMAIL_DELIVERY_FAILED",
                        "Failed to send invitation email. Please try again.",
                    )
                )

            logger.info(f"Invitation sent to {email} for team {team.id}")
            return Return.ok(
                AddMemberResponse(
                    message=(
                        "Invitation sent successfully. User will be added to the "
                        "team when they register."
                    ),
                    invitation=PendingInvitationResponse.from_entity(invitation),
                )
            )
