from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork


class DeleteActivityUseCase:
    """Remove one activity entry; it must belong to the given task"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID, activity_id: UUID
    ) -> Result[None]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            access_result = await load_task_for(
                self.uow, task_id, user_id, TaskIntent.view
            )
            if access_result.is_err():
                return Return.err(access_result.error)

            activity = await self.uow.activity_logs.get_by_id(activity_id)
            if activity is None or activity.task_id != task_id:
                return Return.err(Error("ACTIVITY_NOT_FOUND", "Activity not found"))

            await self.uow.activity_logs.delete(activity)
            await self.uow.commit()
            return Return.ok()
