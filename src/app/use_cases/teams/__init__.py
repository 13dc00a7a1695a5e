"""
Team Use Cases

Teams, memberships, shared invite links and email invitations.
"""

from .create_team_use_case import CreateTeamUseCase
from .list_teams_use_case import ListTeamsUseCase
from .get_team_use_case import GetTeamUseCase
from .update_team_use_case import UpdateTeamUseCase
from .delete_team_use_case import DeleteTeamUseCase
from .generate_invite_use_case import GenerateInviteUseCase
from .join_team_use_case import JoinTeamUseCase
from .add_member_use_case import AddMemberUseCase
from .get_invitation_use_case import GetInvitationUseCase
from .accept_invitation_use_case import AcceptInvitationUseCase
from .claim_pending_invitations_use_case import ClaimPendingInvitationsUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_member_role_use_case import UpdateMemberRoleUseCase

__all__ = [
    "CreateTeamUseCase",
    "ListTeamsUseCase",
    "GetTeamUseCase",
    "UpdateTeamUseCase",
    "DeleteTeamUseCase",
    "GenerateInviteUseCase",
    "JoinTeamUseCase",
    "AddMemberUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "ClaimPendingInvitationsUseCase",
    "RemoveMemberUseCase",
    "UpdateMemberRoleUseCase",
]
