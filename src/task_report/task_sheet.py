"""
Task intake: the ordered task list and its id counter.

A TaskSheet is an immutable value. Adding or removing a task returns a
new sheet; submissions that fail validation return the same sheet
unchanged instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from loguru import logger

from .duration import parse_int
from .report import generate_summary
from .schema import Task

DEFAULT_DAYS = 1


def parse_days(text: Union[str, int, None]) -> int:
    """
    Read a day count as entered; unparseable input counts as 1 day.

    Non-positive values are returned as-is so the caller can reject them.
    """
    if isinstance(text, int):
        return text
    if text is None:
        return DEFAULT_DAYS
    value = parse_int(text)
    return DEFAULT_DAYS if value is None else value


@dataclass(frozen=True)
class TaskSheet:
    tasks: Tuple[Task, ...] = ()
    next_id: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "tasks", tuple(self.tasks))
        ids = [task.task_id for task in self.tasks]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate task ids on sheet: {ids}")
        if ids and self.next_id <= max(ids):
            raise ValueError(
                f"next_id {self.next_id} would reuse an existing id (max {max(ids)})"
            )

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def add_task(
        self,
        project: str,
        description: str,
        days: Union[str, int, None] = "",
    ) -> "TaskSheet":
        """
        Append a task built from raw form input.

        Blank project/description or a non-positive day count drops the
        submission: the same sheet is returned and the counter is untouched.
        """
        days_value = parse_days(days)
        if not project.strip() or not description.strip() or days_value <= 0:
            logger.debug(
                "Dropping task submission project={!r} description={!r} days={!r}",
                project,
                description,
                days,
            )
            return self

        task = Task(
            task_id=self.next_id,
            project=project,
            description=description,
            days=days_value,
        )
        logger.debug("Added task {} ({} days)", task.task_id, task.days)
        return TaskSheet(tasks=self.tasks + (task,), next_id=self.next_id + 1)

    def remove_task(self, task_id: int) -> "TaskSheet":
        """Drop the task with `task_id`. Unknown ids leave the sheet as is."""
        remaining = tuple(task for task in self.tasks if task.task_id != task_id)
        if len(remaining) == len(self.tasks):
            return self
        logger.debug("Removed task {}", task_id)
        return TaskSheet(tasks=remaining, next_id=self.next_id)

    def summary(self, total_hours_input: str) -> str:
        return generate_summary(total_hours_input, self.tasks)
