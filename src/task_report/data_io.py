"""
Data I/O utilities.

Provides thin helpers to load a task sheet from CSV, either from a local
file (Excel-style usage) or from CSV text already in memory. Every row
goes through TaskSheet.add_task, so the usual intake rules apply.
"""

from __future__ import annotations

import csv
from io import StringIO
from typing import Optional, TextIO

from loguru import logger

from .task_sheet import TaskSheet

REQUIRED_COLUMNS = ("project", "description")


def _add_rows(reader: csv.DictReader, sheet: TaskSheet, source: str) -> TaskSheet:
    for row in reader:
        if not any(row.values()):
            continue

        updated = sheet.add_task(
            row.get("project") or "",
            row.get("description") or "",
            row.get("days") or "",
        )
        if updated is sheet:
            logger.warning(
                "{}:{}: skipping invalid task row {}", source, reader.line_num, dict(row)
            )
        sheet = updated
    return sheet


def _read_csv(f: TextIO, sheet: Optional[TaskSheet], source: str) -> TaskSheet:
    reader = csv.DictReader(f)
    missing = [col for col in REQUIRED_COLUMNS if col not in (reader.fieldnames or [])]
    if missing:
        raise ValueError(f"{source}: missing required column(s): {', '.join(missing)}")

    result = _add_rows(reader, sheet or TaskSheet(), source)
    logger.info("Loaded {} task(s) from {}", len(result), source)
    return result


def load_tasks_from_csv(path: str, sheet: Optional[TaskSheet] = None) -> TaskSheet:
    """
    Load tasks from a CSV file.

    Expected columns (case-sensitive):
    - Required: project, description
    - Optional: days (missing or unparseable means 1)

    Extra columns are ignored. Tasks are appended to `sheet` if given.
    """
    with open(path, mode="r", newline="", encoding="utf-8") as f:
        return _read_csv(f, sheet, path)


def read_tasks_csv_text(text: str, sheet: Optional[TaskSheet] = None) -> TaskSheet:
    """Same as load_tasks_from_csv, for CSV text held in memory."""
    return _read_csv(StringIO(text), sheet, "<text>")
