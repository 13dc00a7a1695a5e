from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_log import record_activity
from src.app.services.identity import load_actor
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.task_access import TaskIntent, load_task_for
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import ActivityAction, NotificationType, TaskComment

from .assembler import assemble_task
from .dtos import TaskResponse


class AddCommentUseCase:
    """
    Append a comment to a task.

    Business Rules:
    - Anyone who may view the task may comment (no admin-only restriction)
    - One `comment_added` activity entry
    - The assignee is notified (task_commented) unless they wrote the comment
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, user_id: UUID, task_id: UUID, text: str
    ) -> Result[TaskResponse]:
        text = (text or "").strip()
        if not text:
            return Return.err(
                Error("COMMENT_TEXT_REQUIRED", "Comment text is required")
            )

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            actor = actor_result.value

            access_result = await load_task_for(
                self.uow, task_id, actor.id, TaskIntent.comment
            )
            if access_result.is_err():
                return Return.err(access_result.error)
            task, team = access_result.value.task, access_result.value.team

            comments = task.get_comments()
            comments.append(TaskComment(user_id=actor.id, text=text))
            task.set_comments(comments)
            task.updated_at = utc_now()
            task = await self.uow.tasks.update(task)

            await record_activity(
                self.uow,
                task.id,
                actor.id,
                ActivityAction.comment_added,
                "Added a comment",
                field="comments",
            )

            if task.assigned_to is not None and task.assigned_to != actor.id:
                await self.notifier.notify(
                    task.assigned_to,
                    NotificationType.task_commented,
                    "New Comment on Task",
                    f"{actor.name} commented on: {task.title}",
                    related_task_id=task.id,
                    related_team_id=task.team_id,
                )

            response = await assemble_task(self.uow, task, team)
            await self.uow.commit()
            await self.notifier.deliver()

            return Return.ok(response)
