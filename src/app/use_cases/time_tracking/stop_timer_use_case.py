"""
Stop Timer Use Case

Running -> Idle transition: turns the running session into a time entry.
"""

import math
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_log import format_duration, record_activity
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.assembler import assemble_task
from src.domain.base import utc_now
from src.domain.entities import ActivityAction, TimeEntry

from .dtos import TimeTrackingResponse


class StopTimerUseCase:
    """
    Use case for stopping a task timer.

    Business Rules:
    - Only the user who started the timer can stop it
    - duration = whole seconds since start (floor)
    - Appends the entry, adds duration to time_spent, clears the timer
    - Logs `timer_stopped` with "Stopped timer. Logged Xh Ym"
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID, description: Optional[str] = None
    ) -> Result[TimeTrackingResponse]:
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

            running = task.get_active_timer()
            if running is None or running.user_id != user_id:
                return Return.err(
                    Error("NO_ACTIVE_TIMER", "No active timer found for this user")
                )

            now = utc_now()
            duration = max(0, math.floor((now - running.start_time).total_seconds()))

            entries = task.get_time_entries()
            entries.append(
                TimeEntry(
                    start_time=running.start_time,
                    end_time=now,
                    duration=duration,
                    user_id=user_id,
                    description=description or "",
                )
            )
            task.set_time_entries(entries)
            task.time_spent = (task.time_spent or 0) + duration
            task.set_active_timer(None)
            task.updated_at = now
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                user_id,
                ActivityAction.timer_stopped,
                f"Stopped timer. Logged {format_duration(duration)}",
                field="timeTracking",
                new_value=duration,
            )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(TimeTrackingResponse(task=response, logged_time=duration))
