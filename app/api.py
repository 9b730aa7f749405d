"""
FastAPI app for the task-report system.

Endpoints:
- GET    /health
- GET    /tasks
- POST   /tasks
- DELETE /tasks/{task_id}
- POST   /summary
- POST   /summary/compute

The task sheet lives in memory on the app and is lost on restart.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Union

# --- Make src/ importable ----------------------------------------------------

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from fastapi import FastAPI
from pydantic import BaseModel

from task_report.report import INVALID_DATA_MESSAGE
from task_report.schema import Task
from task_report.task_sheet import TaskSheet

app = FastAPI(title="Task Report API")
app.state.sheet = TaskSheet()

# Guards read-modify-write of app.state.sheet across worker threads.
_sheet_lock = threading.Lock()


# --- Helpers -----------------------------------------------------------------


def current_sheet() -> TaskSheet:
    with _sheet_lock:
        return app.state.sheet


def reset_sheet() -> None:
    """Start over with an empty sheet and a fresh id counter."""
    with _sheet_lock:
        app.state.sheet = TaskSheet()


# --- Request / Response schemas ----------------------------------------------


class TaskPayload(BaseModel):
    """
    A task submission as typed into the form.

    `days` is taken as entered: anything that is not an integer counts
    as 1 day. Blank project/description or days <= 0 are dropped.
    """

    project: str = ""
    description: str = ""
    days: Union[int, str] = ""


class TaskOut(BaseModel):
    task_id: int
    project: str
    description: str
    days: int


class AddTaskResponse(BaseModel):
    added: bool
    task: Optional[TaskOut] = None


class RemoveTaskResponse(BaseModel):
    removed: bool


class SummaryRequest(BaseModel):
    total_hours: str = ""


class ComputeSummaryRequest(BaseModel):
    total_hours: str = ""
    tasks: List[TaskPayload] = []


class SummaryResponse(BaseModel):
    summary: str
    valid: bool


def _task_out(task: Task) -> TaskOut:
    return TaskOut(**asdict(task))


def _summary_response(sheet: TaskSheet, total_hours: str) -> SummaryResponse:
    summary = sheet.summary(total_hours)
    return SummaryResponse(summary=summary, valid=summary != INVALID_DATA_MESSAGE)


# --- Endpoints ---------------------------------------------------------------


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/tasks", response_model=List[TaskOut])
def list_tasks() -> List[TaskOut]:
    return [_task_out(task) for task in current_sheet()]


@app.post("/tasks", response_model=AddTaskResponse)
def add_task(payload: TaskPayload) -> AddTaskResponse:
    """
    Add a task to the in-memory sheet.

    Invalid submissions are not an error: the response has added=false.

    Body example:
    {
      "project": "Alpha",
      "description": "Code review",
      "days": "2"
    }
    """
    with _sheet_lock:
        sheet = app.state.sheet
        updated = sheet.add_task(payload.project, payload.description, payload.days)
        app.state.sheet = updated

    if updated is sheet:
        return AddTaskResponse(added=False)
    return AddTaskResponse(added=True, task=_task_out(updated.tasks[-1]))


@app.delete("/tasks/{task_id}", response_model=RemoveTaskResponse)
def remove_task(task_id: int) -> RemoveTaskResponse:
    with _sheet_lock:
        sheet = app.state.sheet
        updated = sheet.remove_task(task_id)
        app.state.sheet = updated

    return RemoveTaskResponse(removed=updated is not sheet)


@app.post("/summary", response_model=SummaryResponse)
def summary(payload: SummaryRequest) -> SummaryResponse:
    """
    Build the report for the current sheet.

    Always 200: bad input yields the invalid-data message with valid=false.

    Body example:
    {
      "total_hours": "40:00"
    }
    """
    return _summary_response(current_sheet(), payload.total_hours)


@app.post("/summary/compute", response_model=SummaryResponse)
def compute_summary(payload: ComputeSummaryRequest) -> SummaryResponse:
    """
    Stateless variant of /summary: tasks come in the body, the stored
    sheet is neither read nor changed.
    """
    sheet = TaskSheet()
    for item in payload.tasks:
        sheet = sheet.add_task(item.project, item.description, item.days)
    return _summary_response(sheet, payload.total_hours)


# Convenience for local dev:
# uvicorn app.api:app --reload
if __name__ == "__main__":
    import uvicorn

    from task_report.config import get_config
    from task_report.logger import setup_logger

    config = get_config()
    setup_logger(level=config.log_level, log_file=config.log_file)
    uvicorn.run("app.api:app", host=config.api_host, port=config.api_port, reload=True)
