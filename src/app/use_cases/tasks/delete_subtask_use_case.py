from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import ActivityAction

from .assembler import assemble_task
from .dtos import TaskResponse


class DeleteSubtaskUseCase:
    """Remove a subtask and log `subtask_deleted`"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID, subtask_id: str
    ) -> Result[TaskResponse]:
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
            subtask = next((s for s in subtasks if s.id == subtask_id), None)
            if subtask is None:
                return Return.err(Error("SUBTASK_NOT_FOUND", "Subtask not found"))

            task.set_subtasks([s for s in subtasks if s.id != subtask_id])
            task.updated_at = utc_now()
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                user_id,
                ActivityAction.subtask_deleted,
                f'Deleted subtask: "{subtask.title}"',
                field="subtasks",
                old_value=subtask.title,
            )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(response)
