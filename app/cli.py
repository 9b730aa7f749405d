"""
CLI for the task-report system.

Usage examples:

    # Print the report for a CSV of tasks (project, description, days)
    python -m app.cli summary 40:00 data/tasks.csv

    # Same, with tasks given inline
    python -m app.cli summary 10:00 --task Alpha "Code review" 1 --task Beta Docs 3

    # Dump the raw allocation as JSON
    python -m app.cli allocate 40:00 data/tasks.csv
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

# --- Make src/ importable ----------------------------------------------------

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from loguru import logger

from task_report.allocation import allocate
from task_report.config import get_config
from task_report.data_io import load_tasks_from_csv
from task_report.duration import parse_duration
from task_report.errors import TaskReportError
from task_report.logger import setup_logger
from task_report.task_sheet import TaskSheet


def _build_sheet(csv_path: Optional[str], inline_tasks, command: str) -> TaskSheet:
    sheet = TaskSheet()

    if csv_path:
        path = Path(csv_path).resolve()
        if not path.exists():
            raise SystemExit(f"[{command}] CSV file not found: {path}")
        sheet = load_tasks_from_csv(str(path), sheet)

    for project, description, days in inline_tasks or []:
        updated = sheet.add_task(project, description, days)
        if updated is sheet:
            logger.warning(
                "[{}] Ignoring invalid task: {!r} / {!r} / {!r}", command, project, description, days
            )
        sheet = updated

    return sheet


# --- Commands ----------------------------------------------------------------


def cmd_summary(args: argparse.Namespace) -> None:
    """
    Print the time distribution report (or the invalid-data message).
    """
    sheet = _build_sheet(args.csv_path, args.task, "summary")
    print(sheet.summary(args.total).rstrip("\n"))


def cmd_allocate(args: argparse.Namespace) -> None:
    """
    Print the allocation as JSON, with real-valued minutes.
    """
    sheet = _build_sheet(args.csv_path, args.task, "allocate")

    try:
        result = allocate(parse_duration(args.total), sheet.tasks)
    except TaskReportError as e:
        raise SystemExit(f"[allocate] {e.reason}: {e}")

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


# --- Main --------------------------------------------------------------------


def _add_task_inputs(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "total",
        help="Total available time as HH:MM (e.g., 40:00).",
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        default=None,
        help="Optional CSV with columns project, description, days.",
    )
    parser.add_argument(
        "--task",
        nargs=3,
        action="append",
        metavar=("PROJECT", "DESCRIPTION", "DAYS"),
        help="Add a task inline. Can be repeated.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Task Report CLI – distribute total hours across tasks by days."
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override TR_LOG_LEVEL (DEBUG, INFO, WARNING, ...).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # summary
    sum_p = subparsers.add_parser(
        "summary",
        help="Print the time distribution report.",
    )
    _add_task_inputs(sum_p)
    sum_p.set_defaults(func=cmd_summary)

    # allocate
    alloc_p = subparsers.add_parser(
        "allocate",
        help="Print the raw allocation as JSON.",
    )
    _add_task_inputs(alloc_p)
    alloc_p.set_defaults(func=cmd_allocate)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    setup_logger(level=(args.log_level or config.log_level).upper(), log_file=config.log_file)

    args.func(args)


if __name__ == "__main__":
    main()
