from datetime import timedelta
from typing import Dict
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.task_repository import TaskFilter
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import TaskPriority, TaskStatus

from .dtos import (
    AnalyticsStatsResponse,
    DailyTaskCount,
    PriorityBreakdown,
    StatusBreakdown,
)
from .scope import resolve_scope

HISTOGRAM_WINDOW = timedelta(days=30)


class GetAnalyticsStatsUseCase:
    """
    Status and priority breakdowns over everything the user can see, plus a
    per-day histogram (UTC date) of tasks created in the trailing 30 days and
    how many of those are done.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[AnalyticsStatsResponse]:
        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)

            scope_result = await resolve_scope(self.uow, user_id, None, "")
            if scope_result.is_err():
                return Return.err(scope_result.error)
            scope = scope_result.value.scope
            count = self.uow.tasks.count

            statuses = {
                s: await count(scope, TaskFilter(status=s)) for s in TaskStatus
            }
            priorities = {
                p: await count(scope, TaskFilter(priority=p)) for p in TaskPriority
            }

            recent = await self.uow.tasks.list_in_scope(
                scope, TaskFilter(created_since=utc_now() - HISTOGRAM_WINDOW)
            )
            daily: Dict[str, DailyTaskCount] = {}
            for task in recent:
                day = task.created_at.date().isoformat()
                bucket = daily.setdefault(day, DailyTaskCount())
                bucket.total += 1
                if task.status == TaskStatus.done:
                    bucket.done += 1

            return Return.ok(
                AnalyticsStatsResponse(
                    status_breakdown=StatusBreakdown(
                        todo=statuses[TaskStatus.todo],
                        in_progress=statuses[TaskStatus.in_progress],
                        in_review=statuses[TaskStatus.in_review],
                        done=statuses[TaskStatus.done],
                    ),
                    priority_breakdown=PriorityBreakdown(
                        low=priorities[TaskPriority.low],
                        medium=priorities[TaskPriority.medium],
                        high=priorities[TaskPriority.high],
                        urgent=priorities[TaskPriority.urgent],
                    ),
                    daily_tasks=dict(sorted(daily.items())),
                )
            )
