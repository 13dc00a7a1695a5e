from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.task_repository import TaskFilter
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import TaskStatus

from .dtos import DashboardStatsResponse
from .scope import resolve_scope

DUE_SOON_WINDOW = timedelta(days=7)


class GetDashboardStatsUseCase:
    """
    Task counters for the dashboard.

    Scope as in task listing. Overdue: due_date < now and not done. Due soon:
    now <= due_date <= now + 7 days and not done.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, team: Optional[str] = None
    ) -> Result[DashboardStatsResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            scope_result = await resolve_scope(
                self.uow, user_id, team, "Not authorized to view stats from this team"
            )
            if scope_result.is_err():
                return Return.err(scope_result.error)
            scope = scope_result.value.scope

            now = utc_now()
            count = self.uow.tasks.count

            stats = DashboardStatsResponse(
                total_tasks=await count(scope),
                todo_tasks=await count(scope, TaskFilter(status=TaskStatus.todo)),
                in_progress_tasks=await count(
                    scope, TaskFilter(status=TaskStatus.in_progress)
                ),
                in_review_tasks=await count(
                    scope, TaskFilter(status=TaskStatus.in_review)
                ),
                done_tasks=await count(scope, TaskFilter(status=TaskStatus.done)),
                my_tasks=await count(scope, TaskFilter(assigned_to=user_id)),
                created_by_me=await count(scope, TaskFilter(created_by=user_id)),
                overdue_tasks=await count(
                    scope,
                    TaskFilter(due_before=now, exclude_status=TaskStatus.done),
                ),
                due_soon_tasks=await count(
                    scope,
                    TaskFilter(
                        due_from=now,
                        due_until=now + DUE_SOON_WINDOW,
                        exclude_status=TaskStatus.done,
                    ),
                ),
                total_teams=len(scope_result.value.teams),
            )
            return Return.ok(stats)
