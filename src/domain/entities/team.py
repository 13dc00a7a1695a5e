"""
Team Entity

A group of users sharing tasks. Owns its memberships.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utc_now

from .enums import TeamRole


class TeamMember(SQLModel, table=True):
    """
    TeamMember entity - links a User to a Team with a role.

    Business Rules:
    - (team_id, user_id) must be unique
    - Exactly one member carries role=owner: the team owner
    """

    __tablename__ = "team_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    role: TeamRole = Field(default=TeamRole.member)
    joined_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    team: Optional["Team"] = Relationship(back_populates="members")

    __table_args__ = (
        Index("idx_team_member_team_user", "team_id", "user_id", unique=True),
    )


class Team(SQLModel, table=True):
    """
    Team entity.

    Business Rules:
    - owner is immutable after creation
    - owner is always present in members with role=owner (see Team.create)
    - Soft delete: is_active=False hides the team everywhere
    - invite_token holds the sha256 of the shared-link token, never the token itself
    """

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)

    owner_id: UUID = Field(nullable=False, index=True)

    is_active: bool = Field(default=True)

    # Shared-link invite (UC generate/join)
    invite_token: Optional[str] = Field(default=None, max_length=64, index=True)
    invite_token_expire: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    members: List[TeamMember] = Relationship(
        back_populates="team",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "cascade": "all, delete-orphan",
            "order_by": "TeamMember.joined_at",
        },
    )

    __table_args__ = (Index("idx_team_active", "is_active"),)

    @classmethod
    def create(
        cls, name: str, owner_id: UUID, description: Optional[str] = None
    ) -> "Team":
        """Build a team whose owner is already its first member."""
        team = cls(name=name, description=description, owner_id=owner_id)
        team.members.append(TeamMember(user_id=owner_id, role=TeamRole.owner))
        return team

    def find_member(self, user_id: UUID) -> Optional[TeamMember]:
        for member in self.members:
            if member.user_id == user_id:
                return member
        return None

    def is_member(self, user_id: UUID) -> bool:
        return self.find_member(user_id) is not None

    def add_member(self, user_id: UUID, role: TeamRole) -> TeamMember:
        member = TeamMember(user_id=user_id, role=role, joined_at=utc_now())
        self.members.append(member)
        return member

    def remove_member(self, user_id: UUID) -> bool:
        member = self.find_member(user_id)
        if member is None:
            return False
        self.members.remove(member)
        return True

    def managers(self) -> List[TeamMember]:
        """Members with role owner or admin"""
        return [m for m in self.members if m.role in (TeamRole.owner, TeamRole.admin)]
