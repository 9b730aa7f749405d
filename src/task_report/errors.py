"""
Error taxonomy for the task-report system.

Parsing and allocation failures are raised as ValueError subclasses so
callers can catch them broadly. Each carries a `reason` naming the
failure kind:

- ParseError: MalformedFormat, NonNumeric, OutOfRange
- AllocationError: NoTasks, InvalidDuration, Overflow

Only the composed summary entry point and the task intake layer turn
these into plain return values; everything else lets them propagate.
"""

from __future__ import annotations


class TaskReportError(ValueError):
    """Base class for all task-report errors."""

    reason: str = "TaskReportError"


# --- Duration parsing --------------------------------------------------------


class ParseError(TaskReportError):
    """A total-time string could not be read as HH:MM."""

    reason = "ParseError"


class MalformedFormatError(ParseError):
    reason = "MalformedFormat"


class NonNumericError(ParseError):
    reason = "NonNumeric"


class OutOfRangeError(ParseError):
    reason = "OutOfRange"


# --- Allocation --------------------------------------------------------------


class AllocationError(TaskReportError):
    """Time could not be distributed across the given tasks."""

    reason = "AllocationError"


class NoTasksError(AllocationError):
    reason = "NoTasks"


class InvalidDurationError(AllocationError):
    reason = "InvalidDuration"


class AllocationOverflowError(AllocationError):
    reason = "Overflow"
