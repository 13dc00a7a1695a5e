"""
Start Timer Use Case

Idle -> Running transition of a task's timer.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.assembler import assemble_task
from src.domain.base import utc_now
from src.domain.entities import ActiveTimer, ActivityAction, TimerConflictPolicy

from .dtos import TimeTrackingResponse


class StartTimerUseCase:
    """
    Use case for starting a task timer.

    Business Rules:
    - Anyone who may view the task may time it
    - Timer already running for the same user: success, nothing changes
    - Timer running for another user: decided by the conflict policy
        * takeover: the new starter replaces it, the running session is
          discarded without a time entry
        * reject: TIMER_IN_USE
    - Otherwise the timer starts now and `timer_started` is logged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        conflict_policy: TimerConflictPolicy = TimerConflictPolicy.takeover,
    ):
        self.uow = uow
        self.conflict_policy = TimerConflictPolicy(conflict_policy)

    async def execute(
        self, user_id: UUID, task_id: UUID
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
            if running is not None:
                if running.user_id == user_id:
                    return Return.ok(
                        TimeTrackingResponse(
                            task=await assemble_task(self.uow, task, team),
                            message="Timer already running",
                        )
                    )
                if self.conflict_policy == TimerConflictPolicy.reject:
                    return Return.err(
                        Error(
                            "TIMER_IN_USE",
                            "Task is currently being timed by another user",
                        )
                    )

            now = utc_now()
            task.set_active_timer(ActiveTimer(start_time=now, user_id=user_id))
            task.updated_at = now
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                user_id,
                ActivityAction.timer_started,
                "Started timer",
                field="timeTracking",
            )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(TimeTrackingResponse(task=response))
