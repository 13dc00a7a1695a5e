from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ActivityListResponse, ActivityResponse

ACTIVITY_LIMIT = 100


class ListActivitiesUseCase:
    """Newest activity entries of a task (at most 100) for anyone who may view it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID
    ) -> Result[ActivityListResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            access_result = await load_task_for(
                self.uow, task_id, user_id, TaskIntent.view
            )
            if access_result.is_err():
                return Return.err(access_result.error)

            activities = await self.uow.activity_logs.list_by_task(
                task_id, limit=ACTIVITY_LIMIT
            )
            users = {
                u.id: u
                for u in await self.uow.users.get_by_ids(a.user_id for a in activities)
            }
            items = [
                ActivityResponse.from_entity(a, users.get(a.user_id))
                for a in activities
            ]
            return Return.ok(ActivityListResponse(count=len(items), activities=items))
