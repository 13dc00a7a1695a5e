"""
Task authorization predicate.

One function decides whether a user may touch a task. Every task, time
tracking and activity log use case goes through it, so membership and
admin-only-field rules are never re-derived per endpoint.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task, Team, TeamRole


class TaskIntent(str, Enum):
    """What the caller wants to do with the task; drives the denial message"""

    view = "view"
    update = "update"
    delete = "delete"
    comment = "comment on"
    modify = "modify"
    track_time = "track time on"


# Fields a plain team member may not change, in the order they are checked
ADMIN_ONLY_FIELDS = (
    ("due_date", "Only Team Admins can update Due Date"),
    ("priority", "Only Team Admins can update Priority"),
    ("assigned_to", "Only Team Admins can reassign tasks"),
)

MANAGER_ROLES = (TeamRole.owner, TeamRole.admin)


@dataclass
class TaskAccess:
    """A task the actor was allowed to reach, with its team (None if personal)"""

    task: Task
    team: Optional[Team]


def _denied(intent: TaskIntent) -> Error:
    return Error("NOT_AUTHORIZED", f"Not authorized to {intent.value} this task")


def check_task_access(
    task: Task,
    team: Optional[Team],
    user_id: UUID,
    intent: TaskIntent,
    changed_fields: Iterable[str] = (),
) -> Optional[Error]:
    """
    Decide whether user_id may act on task.

    Args:
        task: The task document
        team: The task's team, None for personal tasks or a missing team
        user_id: Acting user
        intent: Operation being attempted
        changed_fields: Task fields the request actually changes (update only)

    Returns:
        None when allowed, otherwise the Error to report
    """
    if task.team_id is None:
        if task.created_by != user_id:
            return _denied(intent)
        return None

    if team is None or not team.is_active:
        return _denied(intent)

    member = team.find_member(user_id)
    if member is None:
        return _denied(intent)

    if intent == TaskIntent.delete:
        if task.created_by != user_id and member.role not in MANAGER_ROLES:
            return _denied(intent)

    if member.role not in MANAGER_ROLES:
        changed = set(changed_fields)
        for field_name, message in ADMIN_ONLY_FIELDS:
            if field_name in changed:
                return Error("ADMIN_ONLY_FIELD", message)

    return None


async def load_task_for(
    uow: UnitOfWork,
    task_id: UUID,
    user_id: UUID,
    intent: TaskIntent,
    changed_fields: Iterable[str] = (),
) -> Result[TaskAccess]:
    """Load a task plus its team and run the predicate. Call inside the uow."""
    task = await uow.tasks.get_by_id(task_id)
    if task is None:
        return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

    team = None
    if task.team_id is not None:
        team = await uow.teams.get_by_id(task.team_id)

    error = check_task_access(task, team, user_id, intent, changed_fields)
    if error is not None:
        return Return.err(error)

    return Return.ok(TaskAccess(task=task, team=team))
