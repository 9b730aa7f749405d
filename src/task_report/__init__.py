"""Distribute a total amount of working time across tasks weighted by days."""

from .allocation import allocate
from .duration import parse_duration
from .report import INVALID_DATA_MESSAGE, format_duration, format_report, generate_summary
from .schema import AllocationResult, Duration, Task, TaskAllocation
from .task_sheet import TaskSheet

__all__ = [
    "INVALID_DATA_MESSAGE",
    "AllocationResult",
    "Duration",
    "Task",
    "TaskAllocation",
    "TaskSheet",
    "allocate",
    "format_duration",
    "format_report",
    "generate_summary",
    "parse_duration",
]
