from uuid import UUID

from libs.result import Result, Return
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.assembler import assemble_task
from src.domain.base import utc_now
from src.domain.entities import ActivityAction

from .dtos import TimeTrackingResponse


class ResetTimeTrackingUseCase:
    """Clear every time entry, zero time_spent and stop any timer, whoever runs it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID
    ) -> Result[TimeTrackingResponse]:
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

            task.set_time_entries([])
            task.time_spent = 0
            task.set_active_timer(None)
            task.updated_at = utc_now()
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                user_id,
                ActivityAction.time_reset,
                "Reset all time tracking data",
                field="timeTracking",
            )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(TimeTrackingResponse(task=response))
