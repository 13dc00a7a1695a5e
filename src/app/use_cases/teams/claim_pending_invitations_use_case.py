import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity import load_actor
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.schema import TeamSummary
from src.domain.base import utc_now

from .common import join_through_invitation
from .dtos import ClaimInvitationsResponse

logger = logging.getLogger(__name__)


class ClaimPendingInvitationsUseCase:
    """
    Consume every live invitation addressed to the acting user's email.

    Meant to run right after sign in. Invitations of deleted teams are skipped
    and left to expire.
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, user_id: UUID) -> Result[ClaimInvitationsResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            actor = actor_result.value

            invitations = await self.uow.pending_invitations.list_live_by_email(
                actor.email, utc_now()
            )

            processed = 0
            joined = []
            for invitation in invitations:
                team = await self.uow.teams.get_active_by_id(invitation.team_id)
                if team is None:
                    continue
                added = await join_through_invitation(
                    self.uow,
                    self.notifier,
                    invitation,
                    team,
                    actor,
                    owner_message=f"A new member joined {team.name}",
                    welcome=False,
                )
                processed += 1
                if added:
                    joined.append(TeamSummary(id=team.id, name=team.name))

            await self.uow.commit()
            await self.notifier.deliver()

            if processed:
                logger.info(f"User {actor.id} claimed {processed} pending invitations")
            return Return.ok(
                ClaimInvitationsResponse(processed=processed, joined=joined)
            )
