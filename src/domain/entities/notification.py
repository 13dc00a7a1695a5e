"""
Notification Entity

In-app notification addressed to a single user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import NotificationType


class Notification(SQLModel, table=True):
    """
    Notification entity.

    Business Rules:
    - Created by system actions only
    - Only read/read_at (and email_sent) ever change
    - Deleted one by one or in bulk by the recipient
    - related_task_id / related_team_id are identifiers only, may dangle
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)
    type: NotificationType = Field(nullable=False)
    title: str = Field(max_length=255)
    message: str

    related_task_id: Optional[UUID] = Field(default=None)
    related_team_id: Optional[UUID] = Field(default=None)

    read: bool = Field(default=False)
    read_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    email_sent: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_notification_user_read", "user_id", "read"),)

    def mark_read(self, now: datetime) -> None:
        self.read = True
        self.read_at = now
