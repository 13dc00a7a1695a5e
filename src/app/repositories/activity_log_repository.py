from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ActivityLog


class IActivityLogRepository(ABC):
    """ActivityLog repository interface - application layer"""

    @abstractmethod
    async def create(self, activity: ActivityLog) -> ActivityLog:
        """Append an activity entry (never updated afterwards)"""
        pass

    @abstractmethod
    async def get_by_id(self, activity_id: UUID) -> Optional[ActivityLog]:
        """Get activity entry by ID"""
        pass

    @abstractmethod
    async def list_by_task(self, task_id: UUID, limit: int = 100) -> List[ActivityLog]:
        """Entries of a task, newest first"""
        pass

    @abstractmethod
    async def delete(self, activity: ActivityLog) -> None:
        """Delete one entry"""
        pass

    @abstractmethod
    async def delete_by_task(self, task_id: UUID) -> int:
        """Delete every entry of a task, returns how many were removed"""
        pass
