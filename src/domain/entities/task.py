"""
Task Entity

The task document: scalar fields plus embedded comments, subtasks,
time entries and the active timer, stored as JSON on the task row.
The whole document is loaded, mutated in memory and written back.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel as PydanticModel
from pydantic import Field as PydanticField
from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import generate_uuid, utc_now

from .enums import TaskPriority, TaskStatus


class TaskComment(PydanticModel):
    id: str = PydanticField(default_factory=generate_uuid)
    user_id: UUID
    text: str
    created_at: datetime = PydanticField(default_factory=utc_now)


class Subtask(PydanticModel):
    id: str = PydanticField(default_factory=generate_uuid)
    title: str
    completed: bool = False
    created_at: datetime = PydanticField(default_factory=utc_now)


class TimeEntry(PydanticModel):
    start_time: datetime
    end_time: datetime
    duration: int = 0  # seconds
    user_id: UUID
    description: str = ""
    created_at: datetime = PydanticField(default_factory=utc_now)


class ActiveTimer(PydanticModel):
    start_time: datetime
    user_id: UUID


class Task(SQLModel, table=True):
    """
    Task entity.

    Business Rules:
    - team_id=None means a personal task, visible only to created_by
    - created_by is immutable
    - time_spent is an incrementally maintained counter (seconds), >= 0,
      equal to the sum of time entry durations once an operation settles
    - at most one active timer per task, whoever started it
    - hard delete; activity logs and notifications pointing here are kept
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=500)
    description: Optional[str] = Field(default=None)

    team_id: Optional[UUID] = Field(default=None, foreign_key="teams.id", index=True)
    assigned_to: Optional[UUID] = Field(default=None, index=True)
    created_by: UUID = Field(nullable=False, index=True)

    status: TaskStatus = Field(default=TaskStatus.todo)
    priority: TaskPriority = Field(default=TaskPriority.medium)
    is_billable: bool = Field(default=False)
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    comments: List[dict] = Field(default_factory=list, sa_column=Column(JSON))
    subtasks: List[dict] = Field(default_factory=list, sa_column=Column(JSON))

    time_spent: int = Field(default=0)
    time_entries: List[dict] = Field(default_factory=list, sa_column=Column(JSON))
    active_timer: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_task_team_status", "team_id", "status"),
        Index("idx_task_due_date", "due_date"),
    )

    @property
    def is_personal(self) -> bool:
        return self.team_id is None

    # Embedded collections are replaced, never mutated in place, so the
    # JSON columns are always flagged dirty.

    def get_comments(self) -> List[TaskComment]:
        return [TaskComment.model_validate(c) for c in self.comments or []]

    def set_comments(self, comments: List[TaskComment]) -> None:
        self.comments = [c.model_dump(mode="json") for c in comments]

    def get_subtasks(self) -> List[Subtask]:
        return [Subtask.model_validate(s) for s in self.subtasks or []]

    def set_subtasks(self, subtasks: List[Subtask]) -> None:
        self.subtasks = [s.model_dump(mode="json") for s in subtasks]

    def get_time_entries(self) -> List[TimeEntry]:
        return [TimeEntry.model_validate(e) for e in self.time_entries or []]

    def set_time_entries(self, entries: List[TimeEntry]) -> None:
        self.time_entries = [e.model_dump(mode="json") for e in entries]

    def get_active_timer(self) -> Optional[ActiveTimer]:
        if not self.active_timer:
            return None
        return ActiveTimer.model_validate(self.active_timer)

    def set_active_timer(self, timer: Optional[ActiveTimer]) -> None:
        self.active_timer = timer.model_dump(mode="json") if timer else None
