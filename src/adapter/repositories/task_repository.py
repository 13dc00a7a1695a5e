from typing import List, Optional
from uuid import UUID

from sqlalchemy import false
from sqlmodel import and_, func, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository, TaskFilter, TaskScope
from src.domain.entities import Task


def _where(scope: TaskScope, task_filter: Optional[TaskFilter]) -> list:
    """Translate a scope and filter into WHERE clauses"""
    visible = []
    if scope.team_ids:
        visible.append(Task.team_id.in_(scope.team_ids))
    if scope.personal_owner_id is not None:
        visible.append(
            and_(Task.team_id == None, Task.created_by == scope.personal_owner_id)
        )
    clauses = [or_(*visible) if visible else false()]

    if task_filter is None:
        return clauses

    if task_filter.status is not None:
        clauses.append(Task.status == task_filter.status)
    if task_filter.exclude_status is not None:
        clauses.append(Task.status != task_filter.exclude_status)
    if task_filter.priority is not None:
        clauses.append(Task.priority == task_filter.priority)
    if task_filter.assigned_to is not None:
        clauses.append(Task.assigned_to == task_filter.assigned_to)
    if task_filter.created_by is not None:
        clauses.append(Task.created_by == task_filter.created_by)
    if task_filter.due_before is not None:
        clauses.append(Task.due_date < task_filter.due_before)
    if task_filter.due_from is not None:
        clauses.append(Task.due_date >= task_filter.due_from)
    if task_filter.due_until is not None:
        clauses.append(Task.due_date <= task_filter.due_until)
    if task_filter.created_since is not None:
        clauses.append(Task.created_at >= task_filter.created_since)
    return clauses


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        stmt = select(Task).where(Task.id == task_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_in_scope(
        self, scope: TaskScope, task_filter: Optional[TaskFilter] = None
    ) -> List[Task]:
        """Tasks in scope matching the filter, newest first"""
        stmt = (
            select(Task)
            .where(*_where(scope, task_filter))
            .order_by(Task.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(
        self, scope: TaskScope, task_filter: Optional[TaskFilter] = None
    ) -> int:
        """Number of tasks in scope matching the filter"""
        stmt = select(func.count()).select_from(Task).where(*_where(scope, task_filter))
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        """Write back the whole task document"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Hard delete a task"""
        await self.session.delete(task)
        await self.session.flush()
