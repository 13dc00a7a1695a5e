from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.assembler import assemble_task
from src.domain.base import utc_now
from src.domain.entities import ActivityAction, TimeEntry

from .dtos import TimeTrackingResponse


class LogTimeUseCase:
    """
    Manually log time on a task.

    Independent of the timer: works whether or not one is running and never
    touches it. The entry has start_time == end_time == now.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        task_id: UUID,
        hours: Optional[int],
        minutes: Optional[int],
        description: Optional[str] = None,
    ) -> Result[TimeTrackingResponse]:
        if hours is None or minutes is None:
            return Return.err(
                Error("TIME_REQUIRED", "Hours and minutes are required")
            )
        if hours < 0 or minutes < 0:
            return Return.err(
                Error("INVALID_DURATION", "Hours and minutes cannot be negative")
            )
        duration = hours * 3600 + minutes * 60
        if duration <= 0:
            return Return.err(
                Error("INVALID_DURATION", "Time must be greater than 0")
            )

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            access_result = await load_task_for(
                self.uow, task_id, user_id, TaskIntent.track_time
            )
            if access_result.is_err():
                return Return.err(access_result.error)
            task, team = access_result.value.task, access_result.value.team

            now = utc_now()
            entries = task.get_time_entries()
            entries.append(
                TimeEntry(
                    start_time=now,
                    end_time=now,
                    duration=duration,
                    user_id=user_id,
                    description=description or "",
                )
            )
            task.set_time_entries(entries)
            task.time_spent = (task.time_spent or 0) + duration
            task.updated_at = now
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                user_id,
                ActivityAction.time_logged,
                f"Manually logged {hours}h {minutes}m",
                field="timeTracking",
                new_value=duration,
            )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(TimeTrackingResponse(task=response, logged_time=duration))
