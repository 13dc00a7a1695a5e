"""
ActivityLog Entity

Append-only trail of field-level task changes.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import ActivityAction


class ActivityLog(SQLModel, table=True):
    """
    ActivityLog entity.

    Business Rules:
    - Never updated
    - task_id references the task by identifier only (no cascade on task delete)
    - Deletable one by one or per task by users who may view the task
    """

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    task_id: UUID = Field(nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    action: ActivityAction = Field(nullable=False)
    field: Optional[str] = Field(default=None, max_length=50)
    old_value: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    new_value: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    description: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_activity_task_created_at", "task_id", "created_at"),)
