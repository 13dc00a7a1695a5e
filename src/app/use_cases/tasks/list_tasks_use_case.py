from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.task_repository import TaskFilter
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TaskStatus

from .assembler import assemble_tasks
from .dtos import TaskListResponse
from .scope import resolve_scope


class ListTasksUseCase:
    """
    List the tasks a user can see, newest first.

    team=None lists every active team of the user plus their personal tasks,
    team="personal" only personal tasks, a team id only that team (member only).
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        team: Optional[str] = None,
        status: Optional[TaskStatus] = None,
        assigned_to: Optional[UUID] = None,
    ) -> Result[TaskListResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            scope_result = await resolve_scope(
                self.uow, user_id, team, "Not authorized to view tasks from this team"
            )
            if scope_result.is_err():
                return Return.err(scope_result.error)

            tasks = await self.uow.tasks.list_in_scope(
                scope_result.value.scope,
                TaskFilter(status=status, assigned_to=assigned_to),
            )
            documents = await assemble_tasks(self.uow, tasks)

            return Return.ok(TaskListResponse(count=len(documents), tasks=documents))
