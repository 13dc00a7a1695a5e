"""
TaskFlow Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Global account role"""

    user = "user"
    admin = "admin"


class TeamRole(str, Enum):
    """User role within a team"""

    owner = "owner"
    admin = "admin"
    member = "member"


class TaskStatus(str, Enum):
    """Kanban column of a task"""

    todo = "todo"
    in_progress = "in-progress"
    in_review = "in-review"
    done = "done"


class TaskPriority(str, Enum):
    """Task priority"""

    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class ActivityAction(str, Enum):
    """Kinds of task mutations recorded in the activity log"""

    created = "created"
    updated = "updated"
    deleted = "deleted"
    status_changed = "status_changed"
    assigned = "assigned"
    unassigned = "unassigned"
    priority_changed = "priority_changed"
    due_date_changed = "due_date_changed"
    billable_status_changed = "billable_status_changed"
    comment_added = "comment_added"
    subtask_added = "subtask_added"
    subtask_completed = "subtask_completed"
    subtask_deleted = "subtask_deleted"
    time_logged = "time_logged"
    timer_started = "timer_started"
    timer_stopped = "timer_stopped"
    time_entry_deleted = "time_entry_deleted"
    time_reset = "time_reset"


class NotificationType(str, Enum):
    """Notification categories"""

    task_assigned = "task_assigned"
    task_updated = "task_updated"
    task_status_changed = "task_status_changed"
    task_commented = "task_commented"
    team_invite = "team_invite"
    team_joined = "team_joined"
    task_due_soon = "task_due_soon"
    task_overdue = "task_overdue"


class TimerConflictPolicy(str, Enum):
    """What startTimer does while another user's timer is running"""

    takeover = "takeover"
    reject = "reject"
