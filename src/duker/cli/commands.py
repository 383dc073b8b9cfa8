# src/duker/cli/commands.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Iterable, Iterator

from ..core.errors import (
    ArgumentError,
    DateFormatError,
    InvalidIndexError,
    StorageError,
    UnknownCommandError,
)
from ..core.parsing import parse_deadline, parse_event, parse_index, parse_keyword, parse_todo
from ..core.ports import CommandEmitter
from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, str, CommandEmitter], None]

# Errors a user can cause by typing something wrong; they become one output line.
PARSER_ERRORS = (ArgumentError, DateFormatError, InvalidIndexError, UnknownCommandError)

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Command-word registry: `todo ...`, `mark 2`, `list`, ..."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        self._handlers[name] = handler
        self._help[name] = help_text

    def handle(self, state: AppState, line: str, emit: CommandEmitter) -> None:
        """
        Run one input line.

        The line is split on the first space into a command word and the rest.
        The word must match exactly (case-sensitive). Parser errors are written
        to `emit` and never raised.
        """
        name, _, rest = line.partition(" ")

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownCommandError()
            handler(state, rest, emit)
        except PARSER_ERRORS as e:
            logger.debug("Rejected command %r: %s", name, e)
            emit(str(e))

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


@contextlib.contextmanager
def _reporting_storage_errors(emit: CommandEmitter) -> Iterator[None]:
    """The in-memory change stands even when the file could not be updated."""
    try:
        yield
    except StorageError as e:
        emit(f"Warning: could not save changes ({e})")


def _emit_numbered(emit: CommandEmitter, header: str, tasks: Iterable[Task]) -> None:
    emit(header)
    for i, task in enumerate(tasks, start=1):
        emit(f"{i}.{task}")


def _add(state: AppState, task: Task, emit: CommandEmitter) -> None:
    with _reporting_storage_errors(emit):
        state.tasks.add(task)
    emit("Got it. I've added this task:")
    emit(str(task))
    emit(f"Now you have {state.tasks.size()} tasks in the list.")


def cmd_todo(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _add(state, parse_todo(rest), emit)


def cmd_deadline(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _add(state, parse_deadline(rest), emit)


def cmd_event(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _add(state, parse_event(rest), emit)


def _update(
    state: AppState,
    rest: str,
    emit: CommandEmitter,
    action: Callable[[int], Task],
    message: str,
) -> None:
    index = parse_index(rest, state.tasks.size())
    task = state.tasks.get(index)
    with _reporting_storage_errors(emit):
        action(index)
    emit(message)
    emit(str(task))


def cmd_mark(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _update(state, rest, emit, state.tasks.mark, "Nice! I've marked this task as done:")


def cmd_unmark(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _update(state, rest, emit, state.tasks.unmark, "Ok! I've marked this task as not done yet:")


def cmd_prioritise(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _update(
        state, rest, emit, state.tasks.prioritise, "Got it. I've marked this task as high priority:"
    )


def cmd_deprioritise(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _update(
        state,
        rest,
        emit,
        state.tasks.deprioritise,
        "Ok! I've removed the high priority mark from this task:",
    )


def cmd_delete(state: AppState, rest: str, emit: CommandEmitter) -> None:
    index = parse_index(rest, state.tasks.size())
    task = state.tasks.get(index)
    with _reporting_storage_errors(emit):
        state.tasks.delete(index)
    emit("Noted. I've removed this task:")
    emit(str(task))
    emit(f"Now you have {state.tasks.size()} tasks in the list.")


def cmd_list(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _emit_numbered(emit, "Here are the tasks in your list:", state.tasks)


def cmd_priority(state: AppState, rest: str, emit: CommandEmitter) -> None:
    _emit_numbered(
        emit, "Here are the high priority tasks in your list:", state.tasks.high_priority()
    )


def cmd_find(state: AppState, rest: str, emit: CommandEmitter) -> None:
    keyword = parse_keyword(rest)
    _emit_numbered(
        emit, "Here are the matching tasks in your list:", state.tasks.find_by_keyword(keyword)
    )


def cmd_bye(state: AppState, rest: str, emit: CommandEmitter) -> None:
    emit("Bye. Hope to see you again soon!")
    state.online = False
    logger.info("Session going offline.")


def cmd_help(state: AppState, rest: str, emit: CommandEmitter) -> None:
    for line in registry.build_help().splitlines():
        emit(line)


registry.register("todo", cmd_todo, help_text="<description> - add a todo")
registry.register(
    "deadline", cmd_deadline, help_text="<description> /by yyyy-MM-dd HH:mm - add a deadline"
)
registry.register(
    "event",
    cmd_event,
    help_text="<description> /from yyyy-MM-dd HH:mm /to yyyy-MM-dd HH:mm - add an event",
)
registry.register("mark", cmd_mark, help_text="<index> - mark a task as done")
registry.register("unmark", cmd_unmark, help_text="<index> - mark a task as not done")
registry.register("prioritise", cmd_prioritise, help_text="<index> - flag as high priority")
registry.register(
    "deprioritise", cmd_deprioritise, help_text="<index> - clear the high priority flag"
)
registry.register("delete", cmd_delete, help_text="<index> - remove a task")
registry.register("list", cmd_list, help_text="- show all tasks")
registry.register("priority", cmd_priority, help_text="- show high priority tasks")
registry.register("find", cmd_find, help_text="<keyword> - search descriptions")
registry.register("help", cmd_help, help_text="- show this help")
registry.register("bye", cmd_bye, help_text="- exit")
