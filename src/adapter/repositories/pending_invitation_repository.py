from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.pending_invitation_repository import (
    IPendingInvitationRepository,
)
from src.domain.entities import PendingInvitation, User


class PendingInvitationRepository(IPendingInvitationRepository):
    """PendingInvitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_live_by_token(
        self, token: str, now: datetime
    ) -> Optional[PendingInvitation]:
        """Unaccepted, unexpired invitation carrying this token"""
        stmt = select(PendingInvitation).where(
            PendingInvitation.invite_token == token,
            PendingInvitation.accepted == False,
            PendingInvitation.expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_live_by_team_and_email(
        self, team_id: UUID, email: str, now: datetime
    ) -> Optional[PendingInvitation]:
        """Unaccepted, unexpired invitation for (team, email)"""
        stmt = select(PendingInvitation).where(
            PendingInvitation.team_id == team_id,
            PendingInvitation.email == User.normalize_email(email),
            PendingInvitation.accepted == False,
            PendingInvitation.expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_live_by_email(
        self, email: str, now: datetime
    ) -> List[PendingInvitation]:
        """Every unaccepted, unexpired invitation addressed to email"""
        stmt = (
            select(PendingInvitation)
            .where(
                PendingInvitation.email == User.normalize_email(email),
                PendingInvitation.accepted == False,
                PendingInvitation.expires_at > now,
            )
            .order_by(PendingInvitation.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: PendingInvitation) -> PendingInvitation:
        """Create a new invitation"""
        invitation.email = User.normalize_email(invitation.email)
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: PendingInvitation) -> PendingInvitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete(self, invitation: PendingInvitation) -> None:
        """Delete an invitation"""
        await self.session.delete(invitation)
        await self.session.flush()
