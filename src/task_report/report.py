"""
Rendering of allocation results as plain text.

All minute-to-HH:MM conversions truncate fractional minutes; they never
round to nearest.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from loguru import logger

from .allocation import allocate
from .duration import parse_duration
from .errors import AllocationError, ParseError
from .schema import AllocationResult, Task

INVALID_DATA_MESSAGE = "Dados inválidos ou nenhuma tarefa cadastrada."


def format_duration(hours: int, minutes: int) -> str:
    """Zero-padded "HH:MM". Hours may use more than two digits."""
    return f"{hours:02d}:{minutes:02d}"


def split_minutes(minutes: float) -> Tuple[int, int]:
    """Truncate a real minute count to (hours, minutes)."""
    return math.floor(minutes / 60), math.floor(minutes) % 60


def format_minutes(minutes: float) -> str:
    return format_duration(*split_minutes(minutes))


def format_report(result: AllocationResult) -> str:
    """
    Render the report text:

        Total de horas: HH:MM
        Total de dias: N
        Horas por dia: HH:MM
        <blank>
        <project> - <description>
        Tempo: HH:MM
        <blank>
        ... one block per task
    """
    lines: List[str] = [
        f"Total de horas: {format_duration(result.total.hours, result.total.minutes)}",
        f"Total de dias: {result.total_days}",
        f"Horas por dia: {format_minutes(result.minutes_per_day)}",
        "",
    ]
    for item in result.per_task:
        lines.append(f"{item.task.project} - {item.task.description}")
        lines.append(f"Tempo: {format_minutes(item.minutes)}")
        lines.append("")

    return "".join(line + "\n" for line in lines)


def generate_summary(total_hours_input: str, tasks: Sequence[Task]) -> str:
    """
    Parse, allocate and format in one step.

    Never raises for bad input: an unreadable total or an empty task list
    both return INVALID_DATA_MESSAGE.
    """
    try:
        duration = parse_duration(total_hours_input)
        result = allocate(duration, tasks)
    except (ParseError, AllocationError) as exc:
        logger.info("Summary not generated ({}): {}", exc.reason, exc)
        return INVALID_DATA_MESSAGE

    return format_report(result)
