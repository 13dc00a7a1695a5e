"""
Task Engine Use Cases

Task CRUD, comments, subtasks and dashboard aggregations.
"""

from .add_comment_use_case import AddCommentUseCase
from .add_subtask_use_case import AddSubtaskUseCase
from .create_task_use_case import CreateTaskUseCase
from .delete_subtask_use_case import DeleteSubtaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import (
    AnalyticsStatsResponse,
    CreateTaskCommand,
    DashboardStatsResponse,
    DeleteTaskResponse,
    TaskListResponse,
    TaskResponse,
)
from .get_analytics_stats_use_case import GetAnalyticsStatsUseCase
from .get_dashboard_stats_use_case import GetDashboardStatsUseCase
from .get_task_use_case import GetTaskUseCase
from .list_tasks_use_case import ListTasksUseCase
from .update_subtask_use_case import UpdateSubtaskUseCase
from .update_task_use_case import UpdateTaskUseCase

__all__ = [
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "GetTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "AddCommentUseCase",
    "AddSubtaskUseCase",
    "UpdateSubtaskUseCase",
    "DeleteSubtaskUseCase",
    "GetDashboardStatsUseCase",
    "GetAnalyticsStatsUseCase",
    "CreateTaskCommand",
    "TaskResponse",
    "TaskListResponse",
    "DeleteTaskResponse",
    "DashboardStatsResponse",
    "AnalyticsStatsResponse",
]
