from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.response import success
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.activities import (
    ClearActivitiesUseCase,
    DeleteActivityUseCase,
    ListActivitiesUseCase,
)
from src.app.use_cases.schema import CamelModel
from src.app.use_cases.tasks import (
    AddCommentUseCase,
    AddSubtaskUseCase,
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteSubtaskUseCase,
    DeleteTaskUseCase,
    GetAnalyticsStatsUseCase,
    GetDashboardStatsUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateSubtaskUseCase,
    UpdateTaskUseCase,
)
from src.app.use_cases.time_tracking import (
    DeleteTimeEntryUseCase,
    LogTimeUseCase,
    ResetTimeTrackingUseCase,
    StartTimerUseCase,
    StopTimerUseCase,
    TimeTrackingResponse,
)
from src.depends import get_current_user_id, get_notification_dispatcher, get_unit_of_work
from src.domain.entities import TaskPriority, TaskStatus

router = APIRouter(prefix="/tasks", tags=["Tasks"])


class CreateTaskRequest(CamelModel):
    """Create task HTTP request payload; `team` omitted for a personal task"""

    title: str
    description: Optional[str] = None
    team: Optional[UUID] = None
    assigned_to: Optional[UUID] = None
    status: TaskStatus = TaskStatus.todo
    priority: TaskPriority = TaskPriority.medium
    due_date: Optional[datetime] = None
    tags: List[str] = []
    is_billable: bool = False


class UpdateTaskRequest(CamelModel):
    """
    Partial update; only the keys present in the body are applied.

    An explicit null clears assignedTo / dueDate.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to: Optional[UUID] = None
    due_date: Optional[datetime] = None
    is_billable: Optional[bool] = None


class CommentRequest(CamelModel):
    text: str = ""


class SubtaskRequest(CamelModel):
    title: str = ""


class UpdateSubtaskRequest(CamelModel):
    title: Optional[str] = None
    completed: Optional[bool] = None


class StopTimerRequest(CamelModel):
    description: Optional[str] = None


class LogTimeRequest(CamelModel):
    hours: Optional[int] = None
    minutes: Optional[int] = None
    description: Optional[str] = None


def _time_tracking_body(value: TimeTrackingResponse, default_message: str) -> dict:
    extra = {}
    if value.logged_time is not None:
        extra["loggedTime"] = value.logged_time
    return success(data=value.task, message=value.message or default_message, **extra)


# ----------------------------------------------------------------------------
# Stats (registered before /{task_id})
# ----------------------------------------------------------------------------


@router.get("/stats/dashboard")
async def dashboard_stats(
    team: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetDashboardStatsUseCase(uow).execute(user_id, team)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.get("/stats/analytics")
async def analytics_stats(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAnalyticsStatsUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


# ----------------------------------------------------------------------------
# Tasks
# ----------------------------------------------------------------------------


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Create Task

    Raises:
        - 400 Bad Request: missing title, assignee outside the team
        - 403 Forbidden: not a member of the team
    """
    command = CreateTaskCommand(
        title=request.title,
        description=request.description,
        team_id=request.team,
        assigned_to=request.assigned_to,
        status=request.status,
        priority=request.priority,
        due_date=request.due_date,
        tags=request.tags,
        is_billable=request.is_billable,
    )
    result = await CreateTaskUseCase(uow, notifier).execute(user_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.get("")
async def list_tasks(
    team: Optional[str] = Query(None),
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    assigned_to: Optional[UUID] = Query(None, alias="assignedTo"),
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTasksUseCase(uow).execute(
        user_id, team=team, status=task_status, assigned_to=assigned_to
    )
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value.tasks, count=result.value.count)


@router.get("/{task_id}")
async def get_task(
    task_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTaskUseCase(uow).execute(user_id, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.put("/{task_id}")
async def update_task(
    task_id: UUID,
    request: UpdateTaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Update Task

    Raises:
        - 400 Bad Request: invalid values, assignee outside the team
        - 403 Forbidden: not allowed, or a plain member touching due date,
          priority or assignee
        - 404 Not Found: unknown task
    """
    patch = request.model_dump(exclude_unset=True)
    result = await UpdateTaskUseCase(uow, notifier).execute(user_id, task_id, patch)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.delete("/{task_id}")
async def delete_task(
    task_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTaskUseCase(uow).execute(user_id, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="Task deleted successfully")


@router.post("/{task_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    task_id: UUID,
    request: CommentRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    result = await AddCommentUseCase(uow, notifier).execute(
        user_id, task_id, request.text
    )
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


# ----------------------------------------------------------------------------
# Subtasks
# ----------------------------------------------------------------------------


@router.post("/{task_id}/subtasks", status_code=status.HTTP_201_CREATED)
async def add_subtask(
    task_id: UUID,
    request: SubtaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AddSubtaskUseCase(uow).execute(user_id, task_id, request.title)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.put("/{task_id}/subtasks/{subtask_id}")
async def update_subtask(
    task_id: UUID,
    subtask_id: str,
    request: UpdateSubtaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateSubtaskUseCase(uow).execute(
        user_id, task_id, subtask_id, title=request.title, completed=request.completed
    )
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.delete("/{task_id}/subtasks/{subtask_id}")
async def delete_subtask(
    task_id: UUID,
    subtask_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteSubtaskUseCase(uow).execute(user_id, task_id, subtask_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


# ----------------------------------------------------------------------------
# Time tracking
# ----------------------------------------------------------------------------


@router.post("/{task_id}/timer/start")
async def start_timer(
    task_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = StartTimerUseCase(uow, ApplicationConfig.TIMER_CONFLICT_POLICY)
    result = await use_case.execute(user_id, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return _time_tracking_body(result.value, "Timer started")


@router.post("/{task_id}/timer/stop")
async def stop_timer(
    task_id: UUID,
    request: Optional[StopTimerRequest] = None,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    description = request.description if request else None
    result = await StopTimerUseCase(uow).execute(user_id, task_id, description)
    if result.is_err():
        raise_for_error(result.error)
    return _time_tracking_body(result.value, "Timer stopped")


@router.post("/{task_id}/timer/log")
async def log_time(
    task_id: UUID,
    request: LogTimeRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await LogTimeUseCase(uow).execute(
        user_id, task_id, request.hours, request.minutes, request.description
    )
    if result.is_err():
        raise_for_error(result.error)
    return _time_tracking_body(result.value, "Time logged successfully")


@router.delete("/{task_id}/timer/entries/{index}")
async def delete_time_entry(
    task_id: UUID,
    index: int,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTimeEntryUseCase(uow).execute(user_id, task_id, index)
    if result.is_err():
        raise_for_error(result.error)
    return _time_tracking_body(result.value, "Time entry deleted")


@router.delete("/{task_id}/timer/reset")
async def reset_time_tracking(
    task_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ResetTimeTrackingUseCase(uow).execute(user_id, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return _time_tracking_body(result.value, "Time tracking reset")


# ----------------------------------------------------------------------------
# Activity log
# ----------------------------------------------------------------------------


@router.get("/{task_id}/activities")
async def list_activities(
    task_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListActivitiesUseCase(uow).execute(user_id, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value.activities, count=result.value.count)


@router.delete("/{task_id}/activities")
async def clear_activities(
    task_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ClearActivitiesUseCase(uow).execute(user_id, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="All activities cleared")


@router.delete("/{task_id}/activities/{activity_id}")
async def delete_activity(
    task_id: UUID,
    activity_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteActivityUseCase(uow).execute(user_id, task_id, activity_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(message="Activity deleted successfully")
