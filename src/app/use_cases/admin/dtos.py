"""
Admin Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.use_cases.schema import CamelModel
from src.domain.entities import User


class AdminUserResponse(CamelModel):
    id: UUID
    name: str
    email: str
    role: str
    is_active: bool
    is_first_login: bool
    created_by: Optional[UUID] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "AdminUserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            is_first_login=user.is_first_login,
            created_by=user.created_by,
            created_at=user.created_at,
        )


class CreateUserResponse(CamelModel):
    user: AdminUserResponse
    email_sent: bool


class UserListResponse(CamelModel):
    count: int
    users: List[AdminUserResponse]


class UserStatsResponse(CamelModel):
    total_users: int
    admin_users: int
    regular_users: int
    recent_users: int
