"""Tests for HH:MM parsing."""

import pytest

from task_report.duration import parse_duration, parse_int
from task_report.errors import (
    MalformedFormatError,
    NonNumericError,
    OutOfRangeError,
    ParseError,
)
from task_report.schema import Duration


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10:00", Duration(10, 0)),
        ("08:30", Duration(8, 30)),
        ("0:59", Duration(0, 59)),
        ("150:05", Duration(150, 5)),
        ("+2:+3", Duration(2, 3)),
    ],
)
def test_parse_valid(text, expected):
    assert parse_duration(text) == expected


def test_total_minutes():
    assert parse_duration("10:00").total_minutes == 600
    assert parse_duration("01:45").total_minutes == 105


@pytest.mark.parametrize("text", ["", "10", "1:2:3", "10h30", "::"])
def test_malformed(text):
    with pytest.raises(MalformedFormatError) as exc_info:
        parse_duration(text)
    assert exc_info.value.reason == "MalformedFormat"


@pytest.mark.parametrize("text", ["aa:10", "10:bb", "10:", ":30", " 1:30", "1.5:00", "1_0:00"])
def test_non_numeric(text):
    with pytest.raises(NonNumericError):
        parse_duration(text)


@pytest.mark.parametrize("text", ["25:61", "10:60", "-1:00", "5:-1"])
def test_out_of_range(text):
    with pytest.raises(OutOfRangeError) as exc_info:
        parse_duration(text)
    assert exc_info.value.reason == "OutOfRange"


def test_parse_errors_share_base_class():
    for text in ("", "x:y", "0:99"):
        with pytest.raises(ParseError):
            parse_duration(text)
    # ParseError is also a ValueError
    with pytest.raises(ValueError):
        parse_duration("nope")


def test_non_string_is_malformed():
    with pytest.raises(MalformedFormatError):
        parse_duration(None)


def test_parse_int():
    assert parse_int("42") == 42
    assert parse_int("-3") == -3
    assert parse_int("") is None
    assert parse_int(" 4") is None
    assert parse_int("4.0") is None


def test_duration_invariants():
    with pytest.raises(OutOfRangeError):
        Duration(1, 60)
    with pytest.raises(OutOfRangeError):
        Duration(-1, 0)


def test_digits_beyond_int_conversion_limit():
    assert parse_int("1" * 5000) is None
    with pytest.raises(NonNumericError):
        parse_duration("1" * 5000 + ":00")
    with pytest.raises(NonNumericError):
        parse_duration("08:" + "0" * 5000)
