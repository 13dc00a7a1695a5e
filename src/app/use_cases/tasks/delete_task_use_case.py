from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteTaskResponse


class DeleteTaskUseCase:
    """
    Hard delete a task.

    Business Rules:
    - Personal task: creator only
    - Team task: creator, or a team owner/admin
    - Activity log entries and notifications pointing at the task are kept
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, task_id: UUID) -> Result[DeleteTaskResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            access_result = await load_task_for(
                self.uow, task_id, user_id, TaskIntent.delete
            )
            if access_result.is_err():
                return Return.err(access_result.error)

            await self.uow.tasks.delete(access_result.value.task)
            await self.uow.commit()

            return Return.ok(DeleteTaskResponse(id=task_id))
