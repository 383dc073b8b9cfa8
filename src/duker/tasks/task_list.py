# src/duker/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered in-memory task list mirrored line-for-line by a TaskRepo.

    Indexes are 0-based. Callers validate user input first; an index outside
    the list here is a bug and raises IndexError before anything changes.

    Every mutation updates memory first and then the repo. If the repo raises
    StorageError the in-memory change stays (no rollback).
    """

    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        # list[-1] would silently pick the last task
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index {index} out of range (size={len(self._tasks)})")

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def load(self, task: Task) -> None:
        """Startup replay only: appends without touching the repo."""
        self._tasks.append(task)

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        logger.debug("Task added index=%d kind=%s", len(self._tasks) - 1, task.kind)
        self._repo.append(task)
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task deleted index=%d", index)
        self._repo.delete_line(index)
        return task

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        self._repo.replace_line(index, task)
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.unmark_done()
        self._repo.replace_line(index, task)
        return task

    def prioritise(self, index: int) -> Task:
        task = self.get(index)
        task.mark_high_priority()
        self._repo.replace_line(index, task)
        return task

    def deprioritise(self, index: int) -> Task:
        task = self.get(index)
        task.unmark_high_priority()
        self._repo.replace_line(index, task)
        return task

    def find_by_keyword(self, keyword: str) -> list[Task]:
        """Case-sensitive substring match on the description, in list order."""
        return [t for t in self._tasks if keyword in t.description]

    def high_priority(self) -> list[Task]:
        return [t for t in self._tasks if t.high_priority]
