from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.response import success
from src.app.services.email_sender import EmailSender
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.schema import CamelModel
from src.app.use_cases.teams import (
    AcceptInvitationUseCase,
    AddMemberUseCase,
    ClaimPendingInvitationsUseCase,
    CreateTeamUseCase,
    DeleteTeamUseCase,
    GenerateInviteUseCase,
    GetInvitationUseCase,
    GetTeamUseCase,
    JoinTeamUseCase,
    ListTeamsUseCase,
    RemoveMemberUseCase,
    UpdateMemberRoleUseCase,
    UpdateTeamUseCase,
)
from src.depends import (
    get_current_user_id,
    get_email_sender,
    get_notification_dispatcher,
    get_unit_of_work,
)

router = APIRouter(prefix="/teams", tags=["Teams"])


class TeamRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None


class AddMemberRequest(CamelModel):
    email: str = ""
    role: str = "member"


class MemberRoleRequest(CamelModel):
    role: str = ""


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_team(
    request: TeamRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateTeamUseCase(uow).execute(
        user_id, request.name or "", request.description
    )
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.get("")
async def list_teams(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTeamsUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value.teams, count=result.value.count)


# ----------------------------------------------------------------------------
# Invitations and joining (registered before /{team_id})
# ----------------------------------------------------------------------------


@router.post("/join/{token}")
async def join_team(
    token: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Join Team through a shared invite link

    Raises:
        - 400 Bad Request: INVALID_INVITE_TOKEN
        - 409 Conflict: ALREADY_MEMBER
    """
    result = await JoinTeamUseCase(uow, notifier).execute(user_id, token)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="Successfully joined the team")


@router.post("/invitations/claim")
async def claim_invitations(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    result = await ClaimPendingInvitationsUseCase(uow, notifier).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.get("/invitations/{token}")
async def get_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Public: details shown on the invitation landing page"""
    result = await GetInvitationUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.post("/invitations/accept/{token}")
async def accept_invitation(
    token: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Accept Email Invitation

    Raises:
        - 400 Bad Request: INVALID_INVITATION_TOKEN
        - 403 Forbidden: EMAIL_MISMATCH
    """
    result = await AcceptInvitationUseCase(uow, notifier).execute(user_id, token)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value.team, message=result.value.message)


# ----------------------------------------------------------------------------
# Single team
# ----------------------------------------------------------------------------


@router.get("/{team_id}")
async def get_team(
    team_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTeamUseCase(uow).execute(user_id, team_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.put("/{team_id}")
async def update_team(
    team_id: UUID,
    request: TeamRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateTeamUseCase(uow).execute(
        user_id, team_id, request.name, request.description
    )
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.delete("/{team_id}")
async def delete_team(
    team_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTeamUseCase(uow).execute(user_id, team_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(message="Team deleted successfully")


@router.post("/{team_id}/invite")
async def generate_invite(
    team_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GenerateInviteUseCase(uow, ttl_days=ApplicationConfig.INVITE_TTL_DAYS)
    result = await use_case.execute(user_id, team_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(
        data=result.value,
        inviteToken=result.value.invite_token,
        inviteUrl=result.value.invite_url,
    )


@router.post("/{team_id}/members", status_code=status.HTTP_201_CREATED)
async def add_member(
    team_id: UUID,
    request: AddMemberRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """
    Add Member by email

    Adds a registered user directly, otherwise emails a pending invitation.

    Raises:
        - 400 Bad Request: missing email, invalid role
        - 403 Forbidden: not owner/admin
        - 409 Conflict: ALREADY_MEMBER, ALREADY_INVITED
        - 502 Bad Gateway: EMAIL_DELIVERY_FAILED (invitation rolled back)
    """
    use_case = AddMemberUseCase(
        uow, notifier, email_sender, ttl_days=ApplicationConfig.INVITE_TTL_DAYS
    )
    result = await use_case.execute(user_id, team_id, request.email, request.role)
    if result.is_err():
        raise_for_error(result.error)
    value = result.value
    if value.team is not None:
        return success(data=value.team, message=value.message)
    return success(data=value.invitation, message=value.message)


@router.delete("/{team_id}/members/{member_id}")
async def remove_member(
    team_id: UUID,
    member_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RemoveMemberUseCase(uow).execute(user_id, team_id, member_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="Member removed successfully")


@router.put("/{team_id}/members/{member_id}")
async def update_member_role(
    team_id: UUID,
    member_id: UUID,
    request: MemberRoleRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateMemberRoleUseCase(uow).execute(
        user_id, team_id, member_id, request.role
    )
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)
