from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_log import format_duration, record_activity
from src.app.services.identity import load_actor
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.assembler import assemble_task
from src.domain.base import utc_now
from src.domain.entities import ActivityAction

from .dtos import TimeTrackingResponse


class DeleteTimeEntryUseCase:
    """
    Remove the time entry at a position of the ledger.

    time_spent drops by the entry's duration but never below zero.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, task_id: UUID, index: int
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

            entries = task.get_time_entries()
            if index < 0 or index >= len(entries):
                return Return.err(
                    Error("TIME_ENTRY_NOT_FOUND", "Time entry not found")
                )

            entry = entries.pop(index)
            task.set_time_entries(entries)
            task.time_spent = max(0, (task.time_spent or 0) - entry.duration)
            task.updated_at = utc_now()
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                user_id,
                ActivityAction.time_entry_deleted,
                f"Deleted time entry ({format_duration(entry.duration)})",
                field="timeTracking",
                old_value=entry.duration,
            )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(TimeTrackingResponse(task=response))
