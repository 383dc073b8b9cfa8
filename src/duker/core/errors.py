# src/duker/core/errors.py

"""
Error kinds shared by the parser, the codec and the storage layer.

Parser-level errors (ArgumentError, DateFormatError, InvalidIndexError,
UnknownCommandError) never escape command dispatch: the registry turns them
into a single line for the user. Their str() is that line.
"""

from __future__ import annotations

DATE_FORMAT_HINT = (
    "Invalid date-time format. "
    "Please provide the date-time in 'yyyy-MM-dd HH:mm' format. "
    "Time should be in 24 hours format."
)


class DukerError(Exception):
    """Base class for all errors raised by duker."""


class ArgumentError(DukerError, ValueError):
    """A required piece of command text is missing or empty."""


class FormatError(DukerError, ValueError):
    """A persisted line has the wrong number of fields or an unknown type tag."""


class DateFormatError(DukerError, ValueError):
    """Date-time text does not match yyyy-MM-dd HH:mm."""

    def __init__(self, message: str = DATE_FORMAT_HINT) -> None:
        super().__init__(message)


class InvalidIndexError(DukerError, IndexError):
    """Index missing, non-numeric or outside the current list."""

    def __init__(
        self, message: str = "Invalid index provided, please provide proper index."
    ) -> None:
        super().__init__(message)


class UnknownCommandError(DukerError):
    def __init__(
        self, message: str = "OOPS!!! I'm sorry, but I don't know what that means :-("
    ) -> None:
        super().__init__(message)


class StorageError(DukerError, OSError):
    """Filesystem failure while loading or writing the task file."""
