# src/duker/tasks/task_codec.py

"""
Line codec: one task <-> one line of the task file.

Line layout (fields joined by " | "):

    priority | type | done | description                   (T)
    priority | type | done | description | by              (D)
    priority | type | done | description | start | end     (E)

Flags are "1"/"0". Date-times are stored as yyyy-MM-ddTHH:mm.
"""

from __future__ import annotations

import re
from datetime import datetime

from ..core.errors import DateFormatError, FormatError
from .task_models import Deadline, Event, Task, TaskKind, Todo

DELIMITER = " | "
INPUT_FORMAT = "%Y-%m-%d %H:%M"
STORAGE_FORMAT = "%Y-%m-%dT%H:%M"

# strptime alone accepts "2024-3-1 9:05"; the user-facing pattern is zero padded.
_DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")

# Date-time fields at the end of the line; everything between the done flag and
# them is the description, so " | " inside a description survives.
_TRAILING_FIELDS = {
    TaskKind.TODO: 0,
    TaskKind.DEADLINE: 1,
    TaskKind.EVENT: 2,
}


def parse_datetime(text: str) -> datetime:
    """Parse `yyyy-MM-dd HH:mm` (24h clock) or raise DateFormatError."""
    if not _DATETIME_RE.fullmatch(text):
        raise DateFormatError()
    try:
        return datetime.strptime(text, INPUT_FORMAT)
    except ValueError as e:
        raise DateFormatError() from e


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _encode_datetime(value: datetime) -> str:
    return value.strftime(STORAGE_FORMAT)


def _decode_datetime(field: str) -> datetime:
    date_part, sep, time_part = field.partition("T")
    if not sep:
        raise DateFormatError()
    return parse_datetime(f"{date_part} {time_part}")


def encode(task: Task) -> str:
    fields = [
        _flag(task.high_priority),
        str(task.kind),
        _flag(task.done),
        task.description,
    ]

    match task:
        case Deadline(by=by):
            fields.append(_encode_datetime(by))
        case Event(start=start, end=end):
            fields.extend((_encode_datetime(start), _encode_datetime(end)))

    return DELIMITER.join(fields)


def decode(line: str) -> Task:
    parts = line.split(DELIMITER)
    if len(parts) < 4:
        raise FormatError(f"Invalid task format: {line!r}")

    priority, tag, done = parts[:3]
    try:
        kind = TaskKind(tag)
    except ValueError as e:
        raise FormatError(f"Unknown task type {tag!r}: {line!r}") from e

    trailing = _TRAILING_FIELDS[kind]
    if len(parts) < 4 + trailing:
        raise FormatError(f"Invalid {kind.name.lower()} format: {line!r}")

    description = DELIMITER.join(parts[3 : len(parts) - trailing])
    times = [_decode_datetime(p) for p in parts[len(parts) - trailing :]]

    flags = {"done": done == "1", "high_priority": priority == "1"}

    match kind:
        case TaskKind.TODO:
            return Todo(description, **flags)
        case TaskKind.DEADLINE:
            return Deadline(description, times[0], **flags)
        case TaskKind.EVENT:
            return Event(description, times[0], times[1], **flags)
