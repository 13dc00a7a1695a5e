from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ClearActivitiesResponse


class ClearActivitiesUseCase:
    """Remove every activity entry of a task"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID
    ) -> Result[ClearActivitiesResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            access_result = await load_task_for(
                self.uow, task_id, user_id, TaskIntent.view
            )
            if access_result.is_err():
                return Return.err(access_result.error)

            deleted = await self.uow.activity_logs.delete_by_task(task_id)
            await self.uow.commit()
            return Return.ok(ClearActivitiesResponse(deleted=deleted))
