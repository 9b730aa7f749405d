"""
Pure math for distributing a total duration across tasks.

No I/O. Just:
- Total days over a task list
- The minutes-per-day rate
- Per-task allocation proportional to each task's days
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from loguru import logger

from .errors import AllocationOverflowError, InvalidDurationError, NoTasksError
from .schema import AllocationResult, Duration, Task, TaskAllocation


def total_days(tasks: Sequence[Task]) -> int:
    return sum(task.days for task in tasks)


def allocate(total: Duration, tasks: Sequence[Task]) -> AllocationResult:
    """
    Split `total` across `tasks` proportionally to their days.

        minutes_per_day = total_minutes / sum(days)
        allocated_k     = minutes_per_day * days_k

    The rate is not rounded before it is reused, so the allocations sum
    back to total_minutes up to float precision. Output order matches
    the input order.

    Raises:
        InvalidDurationError: `total` is not a parsed Duration.
        NoTasksError: `tasks` is empty.
        AllocationOverflowError: the minutes do not fit in a float.
    """
    if not isinstance(total, Duration):
        raise InvalidDurationError(
            f"Expected a parsed Duration, got {type(total).__name__}"
        )
    if not tasks:
        raise NoTasksError("Cannot allocate time without any tasks.")

    days_total = total_days(tasks)

    try:
        minutes_per_day = total.total_minutes / days_total
        days = np.asarray([task.days for task in tasks], dtype=float)
    except OverflowError as e:
        raise AllocationOverflowError(
            f"Total time or day count too large to allocate: {e}"
        ) from e

    with np.errstate(over="ignore"):
        allocated = days * minutes_per_day
    if not np.isfinite(allocated).all():
        raise AllocationOverflowError("Allocated minutes do not fit in a float.")

    logger.debug(
        "Allocating {} minutes over {} days ({} tasks, {:.4f} min/day)",
        total.total_minutes,
        days_total,
        len(tasks),
        minutes_per_day,
    )

    return AllocationResult(
        total=total,
        total_days=days_total,
        minutes_per_day=minutes_per_day,
        per_task=tuple(
            TaskAllocation(task=task, minutes=minutes)
            for task, minutes in zip(tasks, allocated.tolist())
        ),
    )
