from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import Team


class ITeamRepository(ABC):
    """Team repository interface - application layer.

    Teams are loaded together with their members.
    """

    @abstractmethod
    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID, active or not"""
        pass

    @abstractmethod
    async def get_by_ids(self, team_ids: Iterable[UUID]) -> List[Team]:
        """Get every team whose ID is in team_ids"""
        pass

    @abstractmethod
    async def get_active_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID if it has not been soft deleted"""
        pass

    @abstractmethod
    async def list_active_for_user(self, user_id: UUID) -> List[Team]:
        """Active teams the user is a member of, newest first"""
        pass

    @abstractmethod
    async def get_by_invite_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Team]:
        """Active team whose shared-link token hash matches and has not expired"""
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """Create a new team (members included)"""
        pass

    @abstractmethod
    async def update(self, team: Team) -> Team:
        """Update existing team (members included)"""
        pass
