from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Task, TaskPriority, TaskStatus


@dataclass
class TaskScope:
    """
    Which tasks a query may see: tasks of the given teams, plus the personal
    tasks created by personal_owner_id (when set).
    """

    team_ids: List[UUID] = field(default_factory=list)
    personal_owner_id: Optional[UUID] = None


@dataclass
class TaskFilter:
    """Optional narrowing applied inside a TaskScope"""

    status: Optional[TaskStatus] = None
    exclude_status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to: Optional[UUID] = None
    created_by: Optional[UUID] = None
    due_before: Optional[datetime] = None
    due_from: Optional[datetime] = None
    due_until: Optional[datetime] = None
    created_since: Optional[datetime] = None


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def list_in_scope(
        self, scope: TaskScope, task_filter: Optional[TaskFilter] = None
    ) -> List[Task]:
        """Tasks in scope matching the filter, newest first"""
        pass

    @abstractmethod
    async def count(
        self, scope: TaskScope, task_filter: Optional[TaskFilter] = None
    ) -> int:
        """Number of tasks in scope matching the filter"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Write back the whole task document"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Hard delete a task"""
        pass
