"""
Create Task Use Case

Creates a personal or team task and tells the assignee about it.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import email_templates
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_naive_utc
from src.domain.entities import ActivityAction, NotificationType, Task

from .assembler import assemble_task
from .dtos import CreateTaskCommand, TaskResponse


class CreateTaskUseCase:
    """
    Use case for creating a task.

    Business Rules:
    - Team task: the creator must be a member of the (active) team and the
      assignee, when given, must be a member too
    - Personal task: may only be assigned to its creator
    - Defaults: status=todo, priority=medium, is_billable=False, tags=[]
    - Exactly one `created` activity entry
    - Assigning someone else notifies them (task_assigned) and emails them
      (best effort)
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, user_id: UUID, command: CreateTaskCommand
    ) -> Result[TaskResponse]:
        title = (command.title or "").strip()
        if not title:
            return Return.err(Error("TITLE_REQUIRED", "Task title is required"))

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            actor = actor_result.value

            team = None
            if command.team_id is not None:
                team = await self.uow.teams.get_active_by_id(command.team_id)
                if team is None or not team.is_member(actor.id):
                    return Return.err(
                        Error(
                            "NOT_AUTHORIZED",
                            "Not authorized to create tasks in this team",
                        )
                    )
                if command.assigned_to is not None and not team.is_member(
                    command.assigned_to
                ):
                    return Return.err(
                        Error("INVALID_ASSIGNEE", "Assigned user must be a team member")
                    )
            elif command.assigned_to is not None and command.assigned_to != actor.id:
                return Return.err(
                    Error(
                        "PERSONAL_TASK_ASSIGNEE",
                        "Personal tasks can only be assigned to yourself",
                    )
                )

            task = Task(
                title=title,
                description=command.description,
                team_id=command.team_id,
                assigned_to=command.assigned_to,
                created_by=actor.id,
                status=command.status,
                priority=command.priority,
                due_date=as_naive_utc(command.due_date),
                tags=list(command.tags or []),
                is_billable=command.is_billable,
            )
            task = await self.uow.tasks.create(task)

            await record_activity(
                self.uow,
                task.id,
                actor.id,
                ActivityAction.created,
                f'Task "{title}" was created',
            )

            if task.assigned_to is not None and task.assigned_to != actor.id:
                assignee = await self.uow.users.get_by_id(task.assigned_to)
                email = None
                if assignee is not None:
                    email = email_templates.task_assigned_email(
                        task, assignee, actor, first_assignment=True
                    )
                await self.notifier.notify(
                    task.assigned_to,
                    NotificationType.task_assigned,
                    "New Task Assigned",
                    f"{actor.name} assigned you a task: {title}",
                    related_task_id=task.id,
                    related_team_id=task.team_id,
                    email=email,
                )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            await self.notifier.deliver()

            return Return.ok(response)
