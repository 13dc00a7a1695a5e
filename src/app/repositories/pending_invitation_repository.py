from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import PendingInvitation


class IPendingInvitationRepository(ABC):
    """PendingInvitation repository interface - application layer"""

    @abstractmethod
    async def get_live_by_token(
        self, token: str, now: datetime
    ) -> Optional[PendingInvitation]:
        """Unaccepted, unexpired invitation carrying this token"""
        pass

    @abstractmethod
    async def get_live_by_team_and_email(
        self, team_id: UUID, email: str, now: datetime
    ) -> Optional[PendingInvitation]:
        """Unaccepted, unexpired invitation for (team, email)"""
        pass

    @abstractmethod
    async def list_live_by_email(
        self, email: str, now: datetime
    ) -> List[PendingInvitation]:
        """Every unaccepted, unexpired invitation addressed to email"""
        pass

    @abstractmethod
    async def create(self, invitation: PendingInvitation) -> PendingInvitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: PendingInvitation) -> PendingInvitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: PendingInvitation) -> None:
        """Delete an invitation"""
        pass
