# src/duker/core/session.py

"""
Session controller: one input line in, the produced text out.

Output is collected through an explicit emitter instead of redirecting stdout,
so the same Session can back the console REPL, tests or any other front end.
"""

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from .state import AppState

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, state: AppState, registry: CommandRegistry | None = None) -> None:
        self.state = state
        self._registry = registry or command_registry

    @property
    def online(self) -> bool:
        return self.state.online

    def get_greeting(self) -> str:
        app_name = str(getattr(self.state.settings, "app_name", "Duker"))
        return f"Hello! I'm {app_name}\nWhat can I do for you?"

    def get_response(self, command: str) -> str:
        """
        Execute one command and return everything it printed.

        Each emitted line is terminated with a newline, like print() would.
        Calling this after `bye` still runs the command; stopping is up to the
        caller.
        """
        lines: list[str] = []
        try:
            self._registry.handle(self.state, command, lines.append)
        except Exception:
            logger.exception("Command handler crashed.")
            lines.append("Internal error while handling a command.")
        return "".join(f"{line}\n" for line in lines)
