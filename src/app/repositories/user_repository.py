from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import User, UserRole


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        """Get every user whose ID is in user_ids"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """All users, newest first"""
        pass

    @abstractmethod
    async def count_active(
        self,
        role: Optional[UserRole] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count active users, optionally by role and creation date"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Permanently delete a user"""
        pass
