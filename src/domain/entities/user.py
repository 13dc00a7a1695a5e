"""
User Entity

Represents a person who can belong to multiple teams.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - represents a person who can belong to multiple teams.

    Business Rules:
    - Email must be unique across all users, stored lower-cased
    - Accounts are created by an admin, never self-registered
    - Deactivation is a soft flag (is_active=False); permanent delete is explicit
    - Temporary password stored as bcrypt hash, must be changed on first login
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: Optional[str] = Field(default=None, max_length=60)

    role: UserRole = Field(default=UserRole.user)
    is_active: bool = Field(default=True)
    is_first_login: bool = Field(default=False)

    created_by: Optional[UUID] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_role_active", "role", "is_active"),)

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()
