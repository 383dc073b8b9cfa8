# src/duker/core/parsing.py

"""
Argument extraction for task commands.

Each helper takes the text after the command word and either returns a fully
validated value or raises a parser-level error. Nothing here touches the task
list or the file, so a rejected command never leaves a partial write behind.
"""

from __future__ import annotations

from datetime import datetime

from ..tasks.task_codec import parse_datetime
from ..tasks.task_models import Deadline, Event, Todo
from .errors import ArgumentError, InvalidIndexError


def _checked_description(text: str, command: str) -> str:
    description = text.strip()
    if not description:
        raise ArgumentError(f"Description for '{command}' cannot be empty.")
    # one task is one line in the task file
    if "\n" in description or "\r" in description:
        raise ArgumentError(f"Description for '{command}' must fit on one line.")
    return description


def _required_datetime(text: str, message: str) -> datetime:
    text = text.strip()
    if not text:
        raise ArgumentError(message)
    return parse_datetime(text)


def parse_todo(rest: str) -> Todo:
    return Todo(_checked_description(rest, "todo"))


def parse_deadline(rest: str) -> Deadline:
    """`<desc> /by yyyy-MM-dd HH:mm`"""
    by_missing = "Deadline command must contain '/by' followed by a date-time."

    parts = rest.split("/by")
    if len(parts) != 2:
        raise ArgumentError(by_missing)

    description = _checked_description(parts[0], "deadline")

    return Deadline(description, _required_datetime(parts[1], by_missing))


def parse_event(rest: str) -> Event:
    """`<desc> /from yyyy-MM-dd HH:mm /to yyyy-MM-dd HH:mm`"""
    from_missing = "Event command must contain '/from' followed by a start date-time."
    to_missing = "Event command must contain '/to' followed by an end date-time."

    parts_from = rest.split("/from")
    if len(parts_from) != 2:
        raise ArgumentError(from_missing)

    # "/to" has to come after "/from"
    parts_to = parts_from[1].split("/to")
    if len(parts_to) != 2:
        raise ArgumentError(to_missing)

    description = _checked_description(parts_from[0], "event")

    start = _required_datetime(parts_to[0], from_missing)
    end = _required_datetime(parts_to[1], to_missing)
    return Event(description, start, end)


def parse_index(rest: str, size: int) -> int:
    """Turn a 1-based index typed by the user into a checked 0-based one."""
    text = rest.strip()
    # plain ASCII digits only; int() would also take "+1", "1_0" or non-ASCII digits
    if not (text.isascii() and text.isdigit()):
        raise InvalidIndexError()

    number = int(text)
    if not 1 <= number <= size:
        raise InvalidIndexError()
    return number - 1


def parse_keyword(rest: str) -> str:
    keyword = rest.strip()
    if not keyword:
        raise ArgumentError("Please provide a keyword.")
    return keyword
