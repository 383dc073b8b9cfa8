# tests/test_task_codec.py

from __future__ import annotations

from datetime import datetime

import pytest

from duker.core.errors import DateFormatError, FormatError
from duker.tasks.task_codec import decode, encode, parse_datetime
from duker.tasks.task_models import Deadline, Event, Todo


def test_encode_lines() -> None:
    assert encode(Todo("read book")) == "0 | T | 0 | read book"
    assert (
        encode(Deadline("submit report", datetime(2024, 3, 1, 18, 0)))
        == "0 | D | 0 | submit report | 2024-03-01T18:00"
    )
    event = Event(
        "trip",
        datetime(2024, 5, 1, 8, 0),
        datetime(2024, 5, 3, 20, 15),
        done=True,
        high_priority=True,
    )
    assert encode(event) == "1 | E | 1 | trip | 2024-05-01T08:00 | 2024-05-03T20:15"


@pytest.mark.parametrize(
    "task",
    [
        Todo("read book", done=True),
        Deadline("submit report", datetime(2024, 3, 1, 18, 0), high_priority=True),
        Event("party", datetime(2024, 12, 31, 21, 0), datetime(2025, 1, 1, 2, 0)),
        Deadline("a | b", datetime(2024, 3, 1, 18, 0)),
        Event("x | y", datetime(2024, 5, 1, 8, 0), datetime(2024, 5, 1, 9, 0), done=True),
    ],
)
def test_round_trip(task) -> None:
    assert decode(encode(task)) == task


def test_todo_description_may_contain_delimiter() -> None:
    todo = Todo("compare a | b")
    assert decode(encode(todo)) == todo


def test_dated_descriptions_may_contain_delimiter() -> None:
    task = decode("0 | D | 0 | extra | 2024-03-01T18:00 | 2024-03-01T19:00")
    assert task == Deadline("extra | 2024-03-01T18:00", datetime(2024, 3, 1, 19, 0))
    task = decode("0 | E | 0 | a | b | 2024-03-01T18:00 | 2024-03-01T19:00")
    assert task.description == "a | b"
    assert (task.start, task.end) == (datetime(2024, 3, 1, 18, 0), datetime(2024, 3, 1, 19, 0))


def test_decode_flags() -> None:
    task = decode("1 | T | 1 | x")
    assert task.done and task.high_priority
    task = decode("0 | T | 0 | x")
    assert not task.done and not task.high_priority


@pytest.mark.parametrize(
    "line",
    [
        "0 | T | 0",
        "garbage",
        "0 | X | 0 | what",
        "0 | D | 0 | no date",
        "0 | E | 0 | only start | 2024-03-01T18:00",
    ],
)
def test_decode_rejects_bad_shapes(line: str) -> None:
    with pytest.raises(FormatError):
        decode(line)


@pytest.mark.parametrize(
    "line",
    [
        "0 | D | 0 | x | 2024-03-01 18:00",
        "0 | D | 0 | x | 2024-03-01T25:00",
        "0 | D | 0 | x | tomorrowT",
        "0 | E | 0 | x | 2024-03-01T18:00 | 2024-13-01T18:00",
    ],
)
def test_decode_rejects_bad_dates(line: str) -> None:
    with pytest.raises(DateFormatError):
        decode(line)


def test_parse_datetime_is_strict() -> None:
    assert parse_datetime("2024-03-01 18:00") == datetime(2024, 3, 1, 18, 0)
    for bad in ("2024-3-1 18:00", "2024-03-01 6pm", "2024-03-01T18:00", " 2024-03-01 18:00"):
        with pytest.raises(DateFormatError):
            parse_datetime(bad)
