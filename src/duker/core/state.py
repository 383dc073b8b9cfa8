# src/duker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: TaskRepo
    tasks: TaskList

    # `bye` flips this; the front end stops reading input once it is False.
    online: bool = True

    # Problems found while replaying the task file (shown after the greeting).
    startup_messages: list[str] = field(default_factory=list)
