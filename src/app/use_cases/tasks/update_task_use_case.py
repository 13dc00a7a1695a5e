"""
Update Task Use Case

Applies a partial update to a task, records one activity entry per changed
tracked field and notifies the people affected.
"""

from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import email_templates
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.task_access import TaskIntent, check_task_access
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_naive_utc, utc_now
from src.domain.entities import (
    ActivityAction,
    NotificationType,
    Task,
    TaskPriority,
    TaskStatus,
    Team,
    User,
)

from .assembler import assemble_task
from .dtos import TaskResponse

STATUS_LABELS = {
    TaskStatus.todo.value: "To Do",
    TaskStatus.in_progress.value: "In Progress",
    TaskStatus.in_review.value: "In Review",
    TaskStatus.done.value: "Done",
}

PATCHABLE_FIELDS = (
    "title",
    "description",
    "tags",
    "status",
    "priority",
    "assigned_to",
    "due_date",
    "is_billable",
)


def status_label(status: Any) -> str:
    value = status.value if isinstance(status, TaskStatus) else str(status)
    return STATUS_LABELS.get(value, value)


def _date_label(value) -> str:
    return value.date().isoformat() if value else "No due date"


def _changed_fields(task: Task, patch: Dict[str, Any]) -> List[str]:
    """Fields whose patched value differs from the stored one"""
    changed = []
    for name, value in patch.items():
        if name == "due_date":
            value = as_naive_utc(value)
        if getattr(task, name) != value:
            changed.append(name)
    return changed


class UpdateTaskUseCase:
    """
    Use case for updating a task.

    Business Rules:
    - Authorization through the shared task predicate; on team tasks a plain
      member may not change due_date, priority or assigned_to. Such a request
      is rejected as a whole and nothing is written.
    - A new assignee must be a team member (team task) or the actor (personal)
    - Deltas are computed against the stored task before anything is applied:
      one activity entry per changed status, priority, assignee, due date and
      billable flag
    - Notifications, all skipping the actor:
        * new assignee: task_assigned (+ best effort email)
        * assignee before the update: task_updated
        * status change: task_status_changed to the creator, and to the team's
          owner/admins other than the creator
    - The patch is persisted last and the full task returned
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, user_id: UUID, task_id: UUID, patch: Dict[str, Any]
    ) -> Result[TaskResponse]:
        patch = {k: v for k, v in patch.items() if k in PATCHABLE_FIELDS}

        if "title" in patch:
            patch["title"] = (patch["title"] or "").strip()
            if not patch["title"]:
                return Return.err(Error("TITLE_REQUIRED", "Task title is required"))
        if "tags" in patch and patch["tags"] is None:
            patch["tags"] = []
        for name in ("status", "priority", "is_billable"):
            if name in patch and patch[name] is None:
                del patch[name]
        if "due_date" in patch:
            patch["due_date"] = as_naive_utc(patch["due_date"])
        try:
            if "status" in patch:
                patch["status"] = TaskStatus(patch["status"])
            if "priority" in patch:
                patch["priority"] = TaskPriority(patch["priority"])
        except ValueError as exc:
            return Return.err(Error("VALIDATION_ERROR", str(exc)))

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            actor = actor_result.value

            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            team: Optional[Team] = None
            if task.team_id is not None:
                team = await self.uow.teams.get_by_id(task.team_id)

            changed = _changed_fields(task, patch)

            denied = check_task_access(
                task, team, actor.id, TaskIntent.update, changed
            )
            if denied is not None:
                return Return.err(denied)

            new_assignee_id = patch.get("assigned_to")
            reassigned = "assigned_to" in changed
            if reassigned and new_assignee_id is not None:
                if team is not None and not team.is_member(new_assignee_id):
                    return Return.err(
                        Error("INVALID_ASSIGNEE", "Assigned user must be a team member")
                    )
                if team is None and new_assignee_id != actor.id:
                    return Return.err(
                        Error(
                            "PERSONAL_TASK_ASSIGNEE",
                            "Personal tasks can only be assigned to yourself",
                        )
                    )

            old_status = task.status
            previous_assignee = task.assigned_to

            if reassigned and new_assignee_id is not None and new_assignee_id != actor.id:
                new_assignee = await self.uow.users.get_by_id(new_assignee_id)
                if new_assignee is not None:
                    await self.notifier.notify(
                        new_assignee.id,
                        NotificationType.task_assigned,
                        "Task Assigned to You",
                        f"{actor.name} assigned you a task: {task.title}",
                        related_task_id=task.id,
                        related_team_id=task.team_id,
                        email=email_templates.task_assigned_email(
                            task, new_assignee, actor, first_assignment=False
                        ),
                    )

            if previous_assignee is not None and previous_assignee != actor.id:
                await self.notifier.notify(
                    previous_assignee,
                    NotificationType.task_updated,
                    "Task Updated",
                    f"{actor.name} updated the task: {task.title}",
                    related_task_id=task.id,
                    related_team_id=task.team_id,
                )

            await self._record_changes(task, actor, patch, changed)

            if "status" in changed and task.created_by != actor.id:
                await self._notify_status_change(
                    task, team, actor, old_status, patch["status"]
                )

            for name, value in patch.items():
                setattr(task, name, value)
            task.updated_at = utc_now()
            task = await self.uow.tasks.update(task)

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            await self.notifier.deliver()

            return Return.ok(response)

    async def _record_changes(
        self, task: Task, actor: User, patch: Dict[str, Any], changed: List[str]
    ) -> None:
        entries: List[Tuple[ActivityAction, str, Any, Any, str]] = []

        if "status" in changed:
            old, new = task.status.value, patch["status"].value
            entries.append(
                (
                    ActivityAction.status_changed,
                    "status",
                    old,
                    new,
                    f'Status changed from "{old}" to "{new}"',
                )
            )

        if "priority" in changed:
            old, new = task.priority.value, patch["priority"].value
            entries.append(
                (
                    ActivityAction.priority_changed,
                    "priority",
                    old,
                    new,
                    f'Priority changed from "{old}" to "{new}"',
                )
            )

        if "assigned_to" in changed:
            names = {
                u.id: u.name
                for u in await self.uow.users.get_by_ids(
                    [i for i in (task.assigned_to, patch["assigned_to"]) if i]
                )
            }
            old_name = names.get(task.assigned_to, "Unassigned")
            new_id = patch["assigned_to"]
            if new_id is not None:
                new_name = names.get(new_id, "Unassigned")
                entries.append(
                    (
                        ActivityAction.assigned,
                        "assignedTo",
                        old_name,
                        new_name,
                        f"Task assigned to {names.get(new_id, 'user')}",
                    )
                )
            else:
                entries.append(
                    (
                        ActivityAction.unassigned,
                        "assignedTo",
                        old_name,
                        "Unassigned",
                        "Task unassigned",
                    )
                )

        if "due_date" in changed:
            new_due = patch["due_date"]
            description = (
                f"Due date set to {_date_label(new_due)}"
                if new_due
                else "Due date removed"
            )
            entries.append(
                (
                    ActivityAction.due_date_changed,
                    "dueDate",
                    _date_label(task.due_date),
                    _date_label(new_due),
                    description,
                )
            )

        if "is_billable" in changed:
            billable = bool(patch["is_billable"])
            entries.append(
                (
                    ActivityAction.billable_status_changed,
                    "isBillable",
                    task.is_billable,
                    billable,
                    f"Task marked as {'Billable' if billable else 'Non-Billable'}",
                )
            )

        for action, field, old_value, new_value, description in entries:
            await record_activity(
                self.uow,
                task.id,
                actor.id,
                action,
                description,
                field=field,
                old_value=old_value,
                new_value=new_value,
            )

    async def _notify_status_change(
        self,
        task: Task,
        team: Optional[Team],
        actor: User,
        old_status: TaskStatus,
        new_status: Any,
    ) -> None:
        message = (
            f'{actor.name} updated task "{task.title}" status from '
            f"{status_label(old_status)} to {status_label(new_status)}"
        )
        recipients = [task.created_by]
        if team is not None:
            recipients += [
                m.user_id
                for m in team.managers()
                if m.user_id not in (actor.id, task.created_by)
            ]
        for recipient in recipients:
            await self.notifier.notify(
                recipient,
                NotificationType.task_status_changed,
                "Task Progress Updated",
                message,
                related_task_id=task.id,
                related_team_id=task.team_id,
            )
