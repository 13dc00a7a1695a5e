from typing import Any, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityAction, ActivityLog


async def record_activity(
    uow: UnitOfWork,
    task_id: UUID,
    user_id: UUID,
    action: ActivityAction,
    description: str,
    field: Optional[str] = None,
    old_value: Optional[Any] = None,
    new_value: Optional[Any] = None,
) -> ActivityLog:
    """Append one entry to a task's activity trail (inside the caller's uow)"""
    activity = ActivityLog(
        task_id=task_id,
        user_id=user_id,
        action=action,
        field=field,
        old_value=old_value,
        new_value=new_value,
        description=description,
    )
    return await uow.activity_logs.create(activity)


def format_duration(seconds: int) -> str:
    """Render seconds as "Xh Ym" (remaining seconds dropped)"""
    seconds = max(0, int(seconds or 0))
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m"
