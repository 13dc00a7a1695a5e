"""
Time Tracking Use Cases

Timer state machine (Idle <-> Running) and the time entry ledger.
"""

from .delete_time_entry_use_case import DeleteTimeEntryUseCase
from .dtos import TimeTrackingResponse
from .log_time_use_case import LogTimeUseCase
from .reset_time_tracking_use_case import ResetTimeTrackingUseCase
from .start_timer_use_case import StartTimerUseCase
from .stop_timer_use_case import StopTimerUseCase

__all__ = [
    "StartTimerUseCase",
    "StopTimerUseCase",
    "LogTimeUseCase",
    "DeleteTimeEntryUseCase",
    "ResetTimeTrackingUseCase",
    "TimeTrackingResponse",
]
