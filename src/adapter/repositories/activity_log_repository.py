from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.domain.entities import ActivityLog


class ActivityLogRepository(IActivityLogRepository):
    """ActivityLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, activity: ActivityLog) -> ActivityLog:
        """Append an activity entry (never updated afterwards)"""
        self.session.add(activity)
        await self.session.flush()
        await self.session.refresh(activity)
        return activity

    async def get_by_id(self, activity_id: UUID) -> Optional[ActivityLog]:
        """Get activity entry by ID"""
        stmt = select(ActivityLog).where(ActivityLog.id == activity_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_task(self, task_id: UUID, limit: int = 100) -> List[ActivityLog]:
        """Entries of a task, newest first"""
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.task_id == task_id)
            .order_by(ActivityLog.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete(self, activity: ActivityLog) -> None:
        """Delete one entry"""
        await self.session.delete(activity)
        await self.session.flush()

    async def delete_by_task(self, task_id: UUID) -> int:
        """Delete every entry of a task, returns how many were removed"""
        stmt = select(ActivityLog).where(ActivityLog.task_id == task_id)
        result = await self.session.exec(stmt)
        activities = list(result.all())
        for activity in activities:
            await self.session.delete(activity)
        await self.session.flush()
        return len(activities)
