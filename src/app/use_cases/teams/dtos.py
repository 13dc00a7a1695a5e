"""
Team Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.use_cases.schema import CamelModel, TeamSummary, UserSummary
from src.domain.entities import PendingInvitation


class TeamMemberResponse(CamelModel):
    user: Optional[UserSummary] = None
    role: str
    joined_at: datetime


class TeamResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    owner: Optional[UserSummary] = None
    members: List[TeamMemberResponse]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class TeamListResponse(CamelModel):
    count: int
    teams: List[TeamResponse]


class InviteLinkResponse(CamelModel):
    """Shared join link; the plaintext token is only ever returned here"""

    invite_token: str
    invite_url: str
    expires_at: datetime


class PendingInvitationResponse(CamelModel):
    id: UUID
    email: str
    team: UUID
    role: str
    invited_by: UUID
    expires_at: datetime
    accepted: bool
    accepted_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, invitation: PendingInvitation) -> "PendingInvitationResponse":
        return cls(
            id=invitation.id,
            email=invitation.email,
            team=invitation.team_id,
            role=invitation.role.value,
            invited_by=invitation.invited_by,
            expires_at=invitation.expires_at,
            accepted=invitation.accepted,
            accepted_at=invitation.accepted_at,
            created_at=invitation.created_at,
        )


class AddMemberResponse(CamelModel):
    """Either the updated team (existing user) or the pending invitation"""

    message: str
    team: Optional[TeamResponse] = None
    invitation: Optional[PendingInvitationResponse] = None


class InvitedTeam(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None


class InvitationDetailsResponse(CamelModel):
    email: str
    team: InvitedTeam
    invited_by: Optional[UserSummary] = None
    expires_at: datetime


class AcceptInvitationResponse(CamelModel):
    message: str
    already_member: bool
    team: TeamResponse


class ClaimInvitationsResponse(CamelModel):
    processed: int
    joined: List[TeamSummary]
