from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import ActivityAction, Subtask

from .assembler import assemble_task
from .dtos import TaskResponse


class AddSubtaskUseCase:
    """Append an open subtask and log `subtask_added`"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID, title: str
    ) -> Result[TaskResponse]:
        title = (title or "").strip()
        if not title:
            return Return.err(Error("TITLE_REQUIRED", "Subtask title is required"))

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            access_result = await load_task_for(
                self.uow, task_id, user_id, TaskIntent.modify
            )
            if access_result.is_err():
                return Return.err(access_result.error)
            task, team = access_result.value.task, access_result.value.team

            subtasks = task.get_subtasks()
            subtasks.append(Subtask(title=title))
            task.set_subtasks(subtasks)
            task.updated_at = utc_now()
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                user_id,
                ActivityAction.subtask_added,
                f'Added subtask: "{title}"',
                field="subtasks",
                new_value=title,
            )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(response)
