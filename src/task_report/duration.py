"""
Parsing of "HH:MM" total-time input.
"""

from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from .errors import MalformedFormatError, NonNumericError, OutOfRangeError
from .schema import Duration

# Optional sign followed by ASCII digits, nothing else.
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> Optional[int]:
    """
    Read `text` as a base-10 integer, or return None.

    Surrounding whitespace, underscores and non-ASCII digits are rejected
    (unlike the built-in int()), as are digit strings longer than the
    interpreter's int conversion limit.
    """
    if not _INT_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_duration(text: str) -> Duration:
    """
    Parse an "HH:MM" string into a Duration.

    Raises:
        MalformedFormatError: not exactly two ':'-separated segments.
        NonNumericError: a segment is not an integer.
        OutOfRangeError: negative hours, or minutes outside [0, 60).
    """
    if not isinstance(text, str):
        raise MalformedFormatError(f"Expected an HH:MM string, got {type(text).__name__}")

    parts = text.split(":")
    if len(parts) != 2:
        raise MalformedFormatError(f"Expected HH:MM, got {text!r}")

    hours = parse_int(parts[0])
    minutes = parse_int(parts[1])
    if hours is None or minutes is None:
        raise NonNumericError(f"Hours and minutes must be integers, got {text!r}")

    if hours < 0 or not 0 <= minutes < 60:
        raise OutOfRangeError(f"Duration out of range: {text!r}")

    duration = Duration(hours=hours, minutes=minutes)
    logger.debug("Parsed duration {!r} -> {} minutes", text, duration.total_minutes)
    return duration
