"""Tests for the command line interface."""

import json

import pytest

from app.cli import build_parser, main
from task_report.report import INVALID_DATA_MESSAGE


@pytest.fixture
def tasks_csv(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("project,description,days\nA,x,1\nB,y,3\n", encoding="utf-8")
    return path


def test_summary_from_csv(tasks_csv, capsys):
    main(["summary", "10:00", str(tasks_csv)])
    out = capsys.readouterr().out

    assert out.startswith("Total de horas: 10:00\nTotal de dias: 4\nHoras por dia: 02:30\n")
    assert "B - y\nTempo: 07:30\n" in out


def test_summary_inline_tasks(capsys):
    main(["summary", "01:00", "--task", "P", "d", "3"])
    out = capsys.readouterr().out
    assert "Horas por dia: 00:20" in out


def test_summary_csv_and_inline_combined(tasks_csv, capsys):
    main(["summary", "10:00", str(tasks_csv), "--task", "C", "z", "4"])
    out = capsys.readouterr().out

    assert "Total de dias: 8" in out
    assert out.index("B - y") < out.index("C - z")


def test_summary_invalid_input_prints_sentinel(capsys):
    main(["summary", "25:61", "--task", "P", "d", "1"])
    assert capsys.readouterr().out.strip() == INVALID_DATA_MESSAGE

    main(["summary", "08:00"])
    assert capsys.readouterr().out.strip() == INVALID_DATA_MESSAGE


def test_summary_missing_csv(tmp_path):
    with pytest.raises(SystemExit, match="CSV file not found"):
        main(["summary", "08:00", str(tmp_path / "missing.csv")])


def test_allocate_json(tasks_csv, capsys):
    main(["allocate", "10:00", str(tasks_csv)])
    data = json.loads(capsys.readouterr().out)

    assert data["total_minutes"] == 600
    assert data["minutes_per_day"] == 150.0
    assert [t["minutes"] for t in data["per_task"]] == [150.0, 450.0]


def test_allocate_bad_total_exits(tasks_csv):
    with pytest.raises(SystemExit, match="OutOfRange"):
        main(["allocate", "10:75", str(tasks_csv)])


def test_allocate_without_tasks_exits():
    with pytest.raises(SystemExit, match="NoTasks"):
        main(["allocate", "10:00"])


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_invalid_inline_task_is_logged(capsys):
    main(["--log-level", "INFO", "summary", "08:00", "--task", " ", "d", "1"])
    captured = capsys.readouterr()

    assert captured.out.strip() == INVALID_DATA_MESSAGE
    assert "[summary] Ignoring invalid task: ' ' / 'd' / '1'" in captured.err
