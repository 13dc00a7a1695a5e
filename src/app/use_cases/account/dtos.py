"""
Account Use Case DTOs
"""

from datetime import datetime
from uuid import UUID

from src.app.use_cases.schema import CamelModel
from src.domain.entities import User


class MeResponse(CamelModel):
    id: UUID
    name: str
    email: str
    role: str
    is_first_login: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "MeResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            is_first_login=user.is_first_login,
            created_at=user.created_at,
        )
