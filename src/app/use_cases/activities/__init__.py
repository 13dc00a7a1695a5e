"""
Activity Log Use Cases
"""

from .clear_activities_use_case import ClearActivitiesUseCase
from .delete_activity_use_case import DeleteActivityUseCase
from .dtos import ActivityListResponse, ActivityResponse, ClearActivitiesResponse
from .list_activities_use_case import ListActivitiesUseCase

__all__ = [
    "ListActivitiesUseCase",
    "DeleteActivityUseCase",
    "ClearActivitiesUseCase",
    "ActivityResponse",
    "ActivityListResponse",
    "ClearActivitiesResponse",
]
