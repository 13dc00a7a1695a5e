from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.team_repository import ITeamRepository
from src.domain.entities import Team, TeamMember


class TeamRepository(ITeamRepository):
    """Team repository implementation using SQLModel

    Members are eager-loaded through the selectin relationship, and written
    back through its delete-orphan cascade.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID, active or not"""
        stmt = select(Team).where(Team.id == team_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, team_ids: Iterable[UUID]) -> List[Team]:
        """Get every team whose ID is in team_ids"""
        ids = list(set(team_ids))
        if not ids:
            return []
        stmt = select(Team).where(Team.id.in_(ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID if it has not been soft deleted"""
        stmt = select(Team).where(Team.id == team_id, Team.is_active == True)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_active_for_user(self, user_id: UUID) -> List[Team]:
        """Active teams the user is a member of, newest first"""
        stmt = (
            select(Team)
            .join(TeamMember, TeamMember.team_id == Team.id)
            .where(TeamMember.user_id == user_id, Team.is_active == True)
            .order_by(Team.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_invite_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Team]:
        """Active team whose shared-link token hash matches and has not expired"""
        stmt = select(Team).where(
            Team.invite_token == token_hash,
            Team.invite_token_expire > now,
            Team.is_active == True,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, team: Team) -> Team:
        """Create a new team (members included)"""
        self.session.add(team)
        await self.session.flush()
        return team

    async def update(self, team: Team) -> Team:
        """Update existing team (members included)"""
        self.session.add(team)
        await self.session.flush()
        return team
