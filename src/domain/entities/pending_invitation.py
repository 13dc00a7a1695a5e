"""
PendingInvitation Entity

Email-addressed invite to a team for someone without an account yet.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import TeamRole


class PendingInvitation(SQLModel, table=True):
    """
    PendingInvitation entity.

    Business Rules:
    - Created by a team owner/admin for an email with no matching user
    - Expires after 7 days
    - Token stored in clear: single purpose, short lived, used in email links
    - At most one live (unexpired, unaccepted) invitation per (email, team)
    - Consumed when the addressee accepts or signs in
    """

    __tablename__ = "pending_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(max_length=255, nullable=False, index=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    role: TeamRole = Field(default=TeamRole.member)
    invited_by: UUID = Field(nullable=False)

    invite_token: str = Field(unique=True, index=True, max_length=64)

    expires_at: datetime = Field(sa_column=Column(DateTime))
    accepted: bool = Field(default=False)
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_pending_invitation_email_team", "email", "team_id"),
        Index("idx_pending_invitation_expires_at", "expires_at"),
    )

    def is_live(self, now: datetime) -> bool:
        return not self.accepted and self.expires_at > now

    def mark_accepted(self, now: datetime) -> None:
        self.accepted = True
        self.accepted_at = now
