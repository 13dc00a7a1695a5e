from datetime import timedelta

import pytest

from src.app.use_cases.teams import (
    AcceptInvitationUseCase,
    ClaimPendingInvitationsUseCase,
    GetInvitationUseCase,
)
from src.domain.base import utc_now
from src.domain.entities import NotificationType, PendingInvitation, TeamRole
from tests.fixtures.factories import created_notifications, make_team, make_user


def make_invitation(team, email, inviter, role=TeamRole.member):
    return PendingInvitation(
        email=email,
        team_id=team.id,
        role=role,
        invited_by=inviter.id,
        invite_token="a" * 64,
        expires_at=utc_now() + timedelta(days=7),
    )


@pytest.fixture
def invite_setup(mock_uow, seed_users):
    owner = make_user("Owner")
    invitee = make_user("Ivy", email="ivy@example.com")
    team = make_team(owner)
    invitation = make_invitation(team, "ivy@example.com", owner, TeamRole.admin)
    seed_users(owner, invitee)
    mock_uow.teams.get_active_by_id.return_value = team
    mock_uow.pending_invitations.get_live_by_token.return_value = invitation
    return owner, invitee, team, invitation


@pytest.mark.asyncio
async def test_matching_email_joins_exactly_once(mock_uow, notifier, invite_setup):
    owner, invitee, team, invitation = invite_setup

    result = await AcceptInvitationUseCase(mock_uow, notifier).execute(
        invitee.id, invitation.invite_token
    )

    assert result.is_ok()
    assert result.value.already_member is False
    assert result.value.message == "Invitation accepted successfully"
    assert len(team.members) == 2
    assert team.find_member(invitee.id).role == TeamRole.admin
    assert invitation.accepted is True
    assert invitation.accepted_at is not None

    notified = [(n.user_id, n.type) for n in created_notifications(mock_uow)]
    assert notified == [
        (owner.id, NotificationType.team_joined),
        (invitee.id, NotificationType.team_invite),
    ]
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_email_comparison_ignores_case(mock_uow, seed_users, notifier, invite_setup):
    owner, invitee, team, invitation = invite_setup
    invitation.email = "IVY@Example.com"

    result = await AcceptInvitationUseCase(mock_uow, notifier).execute(
        invitee.id, invitation.invite_token
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_mismatched_email_is_rejected(mock_uow, seed_users, notifier, invite_setup):
    owner, invitee, team, invitation = invite_setup
    intruder = make_user("Mallory")
    seed_users(owner, invitee, intruder)

    result = await AcceptInvitationUseCase(mock_uow, notifier).execute(
        intruder.id, invitation.invite_token
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_MISMATCH"
    assert invitation.accepted is False
    assert len(team.members) == 1
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_existing_member_still_consumes_invitation(
    mock_uow, notifier, invite_setup
):
    owner, invitee, team, invitation = invite_setup
    team.add_member(invitee.id, TeamRole.member)

    result = await AcceptInvitationUseCase(mock_uow, notifier).execute(
        invitee.id, invitation.invite_token
    )

    assert result.is_ok()
    assert result.value.already_member is True
    assert len(team.members) == 2
    assert team.find_member(invitee.id).role == TeamRole.member
    assert invitation.accepted is True
    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_expired_or_unknown_token(mock_uow, notifier, invite_setup):
    owner, invitee, team, invitation = invite_setup
    mock_uow.pending_invitations.get_live_by_token.return_value = None

    result = await AcceptInvitationUseCase(mock_uow, notifier).execute(
        invitee.id, "nope"
    )

    assert result.is_err()
    assert result.error.code == "INVALID_INVITATION_TOKEN"


@pytest.mark.asyncio
async def test_get_invitation_details(mock_uow, invite_setup):
    owner, invitee, team, invitation = invite_setup

    result = await GetInvitationUseCase(mock_uow).execute(invitation.invite_token)

    assert result.is_ok()
    assert result.value.email == "ivy@example.com"
    assert result.value.team.id == team.id
    assert result.value.invited_by.id == owner.id


@pytest.mark.asyncio
async def test_claim_processes_every_live_invitation(
    mock_uow, notifier, invite_setup
):
    owner, invitee, team, invitation = invite_setup
    other_team = make_team(owner, (invitee, TeamRole.member), name="Ops")
    already = make_invitation(other_team, invitee.email, owner)
    teams = {team.id: team, other_team.id: other_team}

    async def get_active_by_id(team_id):
        return teams.get(team_id)

    mock_uow.teams.get_active_by_id.side_effect = get_active_by_id
    mock_uow.pending_invitations.list_live_by_email.return_value = [
        invitation,
        already,
    ]

    result = await ClaimPendingInvitationsUseCase(mock_uow, notifier).execute(
        invitee.id
    )

    assert result.is_ok()
    assert result.value.processed == 2
    assert [t.id for t in result.value.joined] == [team.id]
    assert invitation.accepted is True
    assert already.accepted is True

    notifications = created_notifications(mock_uow)
    assert len(notifications) == 1
    assert notifications[0].user_id == owner.id
    assert notifications[0].message == f"A new member joined {team.name}"
