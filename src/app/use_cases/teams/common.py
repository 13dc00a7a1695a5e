"""
Helpers shared by the team use cases.
"""

import hashlib
from typing import Optional
from uuid import UUID

from libs.result import Error
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.schema import UserSummary
from src.domain.base import utc_now
from src.domain.entities import (
    NotificationType,
    PendingInvitation,
    Team,
    TeamRole,
    User,
)

from .dtos import TeamMemberResponse, TeamResponse

MANAGER_ROLES = (TeamRole.owner, TeamRole.admin)

TEAM_NOT_FOUND = Error("TEAM_NOT_FOUND", "Team not found")


def hash_invite_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def is_manager(team: Team, user_id: UUID) -> bool:
    member = team.find_member(user_id)
    return member is not None and member.role in MANAGER_ROLES


async def assemble_team(uow: UnitOfWork, team: Team) -> TeamResponse:
    """Team with owner and members resolved to user summaries"""
    ids = {m.user_id for m in team.members}
    ids.add(team.owner_id)
    users = {u.id: u for u in await uow.users.get_by_ids(ids)}

    def summary(user_id: UUID) -> Optional[UserSummary]:
        user = users.get(user_id)
        return UserSummary.from_entity(user) if user else None

    return TeamResponse(
        id=team.id,
        name=team.name,
        description=team.description,
        owner=summary(team.owner_id),
        members=[
            TeamMemberResponse(
                user=summary(m.user_id), role=m.role.value, joined_at=m.joined_at
            )
            for m in team.members
        ],
        is_active=team.is_active,
        created_at=team.created_at,
        updated_at=team.updated_at,
    )


async def join_through_invitation(
    uow: UnitOfWork,
    notifier: NotificationDispatcher,
    invitation: PendingInvitation,
    team: Team,
    user: User,
    owner_message: str,
    welcome: bool,
) -> bool:
    """
    Consume a pending invitation for user.

    The invitation is marked accepted whether or not the user was already a
    member. Returns True when a membership was added, in which case the owner
    is notified (and the new member too when welcome is set).
    """
    now = utc_now()
    invitation.mark_accepted(now)
    await uow.pending_invitations.update(invitation)

    if team.is_member(user.id):
        return False

    team.add_member(user.id, invitation.role)
    team.updated_at = now
    await uow.teams.update(team)

    await notifier.notify(
        team.owner_id,
        NotificationType.team_joined,
        "New Team Member",
        owner_message,
        related_team_id=team.id,
    )
    if welcome:
        await notifier.notify(
            user.id,
            NotificationType.team_invite,
            "Welcome to the team!",
            f"You joined {team.name}",
            related_team_id=team.id,
        )
    return True
