"""
Pytest configuration and shared fixtures for task-report tests.
"""

from typing import Generator, List

import pytest
from loguru import logger

from task_report.schema import Task
from task_report.task_sheet import TaskSheet


@pytest.fixture(autouse=True)
def _reset_loguru() -> Generator[None, None, None]:
    """Drop sinks added during a test (the CLI adds one bound to captured stderr)."""
    yield
    logger.remove()


@pytest.fixture
def two_tasks() -> List[Task]:
    """A: 1 day, B: 3 days."""
    return [
        Task(task_id=1, project="A", description="x", days=1),
        Task(task_id=2, project="B", description="y", days=3),
    ]


@pytest.fixture
def sample_sheet() -> TaskSheet:
    return (
        TaskSheet()
        .add_task("Alpha", "Code review", "2")
        .add_task("Beta", "Docs", "1")
        .add_task("Gamma", "Deploy", "5")
    )
