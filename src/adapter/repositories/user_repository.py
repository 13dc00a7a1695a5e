from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User, UserRole


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)"""
        stmt = select(User).where(User.email == User.normalize_email(email))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        """Get every user whose ID is in user_ids"""
        ids = list(set(user_ids))
        if not ids:
            return []
        stmt = select(User).where(User.id.in_(ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_all(self) -> List[User]:
        """All users, newest first"""
        stmt = select(User).order_by(User.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_active(
        self,
        role: Optional[UserRole] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count active users, optionally by role and creation date"""
        stmt = select(func.count()).select_from(User).where(User.is_active == True)
        if role is not None:
            stmt = stmt.where(User.role == role)
        if created_since is not None:
            stmt = stmt.where(User.created_at >= created_since)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, user: User) -> User:
        """Create a new user"""
        user.email = User.normalize_email(user.email)
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Permanently delete a user"""
        await self.session.delete(user)
        await self.session.flush()
