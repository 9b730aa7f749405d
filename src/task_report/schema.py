"""
Data schemas for the task-report system.

Defines:
- Task: a unit of work, weighted by a number of days
- Duration: a normalized hours/minutes pair
- TaskAllocation / AllocationResult: how a total duration is split
  across tasks
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from .errors import OutOfRangeError


@dataclass(frozen=True)
class Task:
    """
    A single task on the sheet.

    Tasks are immutable: to change one, remove it and add a new one.
    Ids are handed out by TaskSheet and are never reused.
    """

    task_id: int
    project: str
    description: str
    days: int

    def __post_init__(self) -> None:
        if self.task_id < 1:
            raise ValueError(f"Task id must be >= 1, got {self.task_id}")
        if not self.project.strip() or not self.description.strip():
            raise ValueError("Task project and description must not be blank.")
        if self.days <= 0:
            raise ValueError(f"Task days must be positive, got {self.days}")


@dataclass(frozen=True)
class Duration:
    """
    Elapsed time as (hours, minutes).

    minutes is always in [0, 60); hours has no upper bound.
    """

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        if self.hours < 0:
            raise OutOfRangeError(f"Hours must be >= 0, got {self.hours}")
        if not 0 <= self.minutes < 60:
            raise OutOfRangeError(f"Minutes must be in [0, 60), got {self.minutes}")

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes


@dataclass(frozen=True)
class TaskAllocation:
    task: Task
    minutes: float


@dataclass(frozen=True)
class AllocationResult:
    """
    Result of distributing a total duration across tasks.

    minutes_per_day is kept real-valued; per_task follows the order of
    the tasks it was computed from.
    """

    total: Duration
    total_days: int
    minutes_per_day: float
    per_task: Tuple[TaskAllocation, ...]

    @property
    def total_minutes(self) -> int:
        return self.total.total_minutes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_minutes": self.total_minutes,
            "total_days": self.total_days,
            "minutes_per_day": self.minutes_per_day,
            "per_task": [
                {**asdict(item.task), "minutes": item.minutes}
                for item in self.per_task
            ],
        }
