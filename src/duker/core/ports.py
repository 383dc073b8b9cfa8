# src/duker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list and the command layer depend on these Protocols rather than on the
file-backed store, so tests can swap in in-memory fakes.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
# Output sink: receives one user-visible line per call (no trailing newline).


class TaskRepo(Protocol):
    """Keeps some durable copy of the task list in the same order as memory."""

    load_messages: list[str]

    def load_all(self) -> list[Task]: ...
    def append(self, task: Task) -> None: ...
    def replace_line(self, index: int, task: Task) -> None: ...
    def delete_line(self, index: int) -> None: ...
    def rewrite(self, tasks: list[Task]) -> None: ...
