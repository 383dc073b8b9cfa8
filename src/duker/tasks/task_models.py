# src/duker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

DISPLAY_FORMAT = "%b %d %Y %H:%M"


class TaskKind(StrEnum):
    """Single-letter variant tag, shared by the display and the file format."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def format_display(value: datetime) -> str:
    return value.strftime(DISPLAY_FORMAT)


@dataclass(slots=True)
class Task:
    """
    Common part of every task.

    Only `done` and `high_priority` change after creation; the variant
    (Todo / Deadline / Event) is fixed by the concrete class.
    """

    kind: ClassVar[TaskKind]

    description: str
    done: bool = field(default=False, kw_only=True)
    high_priority: bool = field(default=False, kw_only=True)

    def mark_done(self) -> None:
        self.done = True

    def unmark_done(self) -> None:
        self.done = False

    def mark_high_priority(self) -> None:
        self.high_priority = True

    def unmark_high_priority(self) -> None:
        self.high_priority = False

    def __str__(self) -> str:
        status = "X" if self.done else " "
        marker = "[!] " if self.high_priority else ""
        head = f"{marker}[{self.kind}][{status}] {self.description}"

        match self:
            case Deadline(by=by):
                return f"{head} (by: {format_display(by)})"
            case Event(start=start, end=end):
                return f"{head} (from: {format_display(start)} to: {format_display(end)})"
            case _:
                return head


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    by: datetime


@dataclass(slots=True)
class Event(Task):
    # end may precede start; not validated
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: datetime
    end: datetime
