"""
Activity Log Use Case DTOs
"""

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from src.app.use_cases.schema import CamelModel, UserSummary
from src.domain.entities import ActivityLog, User


class ActivityResponse(CamelModel):
    id: UUID
    task: UUID
    user: Optional[UserSummary] = None
    action: str
    field: Optional[str] = None
    old_value: Optional[Any] = None
    new_value: Optional[Any] = None
    description: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(
        cls, activity: ActivityLog, user: Optional[User]
    ) -> "ActivityResponse":
        return cls(
            id=activity.id,
            task=activity.task_id,
            user=UserSummary.from_entity(user) if user else None,
            action=activity.action.value,
            field=activity.field,
            old_value=activity.old_value,
            new_value=activity.new_value,
            description=activity.description,
            created_at=activity.created_at,
        )


class ActivityListResponse(CamelModel):
    count: int
    activities: List[ActivityResponse]


class ClearActivitiesResponse(CamelModel):
    deleted: int
