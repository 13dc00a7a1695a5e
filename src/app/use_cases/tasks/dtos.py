"""
Task Use Case DTOs (Data Transfer Objects)

Commands coming in from the API layer and the read-side task document
going out, with users and team resolved to summaries.
"""

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.use_cases.schema import CamelModel, TeamSummary, UserSummary
from src.domain.entities import TaskPriority, TaskStatus

# ============================================================================
# Command DTOs
# ============================================================================


class CreateTaskCommand(BaseModel):
    """Input for task creation"""

    title: str
    description: Optional[str] = None
    team_id: Optional[UUID] = None
    assigned_to: Optional[UUID] = None
    status: TaskStatus = TaskStatus.todo
    priority: TaskPriority = TaskPriority.medium
    due_date: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)
    is_billable: bool = False


# ============================================================================
# Response DTOs
# ============================================================================


class CommentResponse(CamelModel):
    id: str
    user: Optional[UserSummary] = None
    text: str
    created_at: datetime


class SubtaskResponse(CamelModel):
    id: str
    title: str
    completed: bool
    created_at: datetime


class TimeEntryResponse(CamelModel):
    start_time: datetime
    end_time: datetime
    duration: int
    user_id: UUID
    description: str
    created_at: datetime


class ActiveTimerResponse(CamelModel):
    start_time: datetime
    user_id: UUID


class TaskResponse(CamelModel):
    """Full task document as returned by every task endpoint"""

    id: UUID
    title: str
    description: Optional[str] = None
    team: Optional[TeamSummary] = None
    assigned_to: Optional[UserSummary] = None
    created_by: Optional[UserSummary] = None
    status: TaskStatus
    priority: TaskPriority
    is_billable: bool
    due_date: Optional[datetime] = None
    tags: List[str]
    comments: List[CommentResponse]
    subtasks: List[SubtaskResponse]
    time_spent: int
    time_entries: List[TimeEntryResponse]
    active_timer: Optional[ActiveTimerResponse] = None
    created_at: datetime
    updated_at: datetime


class TaskListResponse(CamelModel):
    count: int
    tasks: List[TaskResponse]


class DeleteTaskResponse(CamelModel):
    id: UUID


class DashboardStatsResponse(CamelModel):
    total_tasks: int
    todo_tasks: int
    in_progress_tasks: int
    in_review_tasks: int
    done_tasks: int
    my_tasks: int
    created_by_me: int
    overdue_tasks: int
    due_soon_tasks: int
    total_teams: int


class StatusBreakdown(CamelModel):
    todo: int
    in_progress: int
    in_review: int
    done: int


class PriorityBreakdown(CamelModel):
    low: int
    medium: int
    high: int
    urgent: int


class DailyTaskCount(CamelModel):
    total: int = 0
    done: int = 0


class AnalyticsStatsResponse(CamelModel):
    status_breakdown: StatusBreakdown
    priority_breakdown: PriorityBreakdown
    # keyed by UTC calendar date, YYYY-MM-DD
    daily_tasks: Dict[str, DailyTaskCount]
