# src/duker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the file store and the task list into AppState,
- replays the task file into memory.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file.parent.mkdir(parents=True, exist_ok=True)


def load_tasks(store: TaskRepo, tasks: TaskList) -> list[str]:
    """
    Replay the store into `tasks`; returns messages worth showing the user.

    An unreadable file leaves the list empty instead of stopping the app.
    """
    try:
        loaded = store.load_all()
    except StorageError as e:
        return [str(e)]

    for task in loaded:
        tasks.load(task)
    return list(store.load_messages)


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if store is None:
        _ensure_local_dirs(settings)
        store = TaskFileStore(settings.tasks_file)

    tasks = TaskList(store)
    messages = load_tasks(store, tasks)

    state = AppState(
        settings=settings,
        store=store,
        tasks=tasks,
        startup_messages=messages,
    )
    logger.info("State ready: %d tasks", tasks.size())
    return state
