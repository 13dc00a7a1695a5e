from typing import Optional
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


class UpdateSubtaskUseCase:
    """
    Rename and/or (un)complete a subtask.

    Logs `subtask_completed` when the completed flag flips; a change that only
    touches the title logs `updated`.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        task_id: UUID,
        subtask_id: str,
        title: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Result[TaskResponse]:
        if title is not None:
            title = title.strip()
            if not title:
                return Return.err(
                    Error("TITLE_REQUIRED", "Subtask title is required")
                )

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

            was_completed = subtask.completed
            old_title = subtask.title
            if title is not None:
                subtask.title = title
            if completed is not None:
                subtask.completed = completed

            task.set_subtasks(subtasks)
            task.updated_at = utc_now()
            task = await self.uow.tasks.update(task)

            if completed is not None and completed != was_completed:
                await record_activity(
                    self.uow,
                    task.id,
                    user_id,
                    ActivityAction.subtask_completed,
                    f'{"Completed" if completed else "Uncompleted"} subtask: "{subtask.title}"',
                    field="subtasks",
                    old_value=was_completed,
                    new_value=completed,
                )
            elif title is not None and title != old_title:
                await record_activity(
                    self.uow,
                    task.id,
                    user_id,
                    ActivityAction.updated,
                    f'Renamed subtask "{old_title}" to "{title}"',
                    field="subtasks",
                    old_value=old_title,
                    new_value=title,
                )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            return Return.ok(response)
