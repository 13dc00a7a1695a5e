"""
Time Tracking Use Case DTOs
"""

from typing import Optional

from src.app.use_cases.schema import CamelModel
from src.app.use_cases.tasks.dtos import TaskResponse


class TimeTrackingResponse(CamelModel):
    """Task after a time tracking operation"""

    task: TaskResponse
    # seconds added to time_spent by this operation, when it added any
    logged_time: Optional[int] = None
    message: Optional[str] = None
