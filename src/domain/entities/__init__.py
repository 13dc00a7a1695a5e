"""
TaskFlow Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ActivityAction,
    NotificationType,
    TaskPriority,
    TaskStatus,
    TeamRole,
    TimerConflictPolicy,
    UserRole,
)

# Export all entities
from .user import User
from .team import Team, TeamMember
from .pending_invitation import PendingInvitation
from .task import ActiveTimer, Subtask, Task, TaskComment, TimeEntry
from .activity_log import ActivityLog
from .notification import Notification

__all__ = [
    # Enums
    "ActivityAction",
    "NotificationType",
    "TaskPriority",
    "TaskStatus",
    "TeamRole",
    "TimerConflictPolicy",
    "UserRole",
    # Entities
    "User",
    "Team",
    "TeamMember",
    "PendingInvitation",
    "Task",
    "TaskComment",
    "Subtask",
    "TimeEntry",
    "ActiveTimer",
    "ActivityLog",
    "Notification",
]
