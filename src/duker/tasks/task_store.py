# src/duker/tasks/task_store.py

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from ..core.errors import DateFormatError, FormatError, StorageError
from .task_codec import decode, encode
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    Flat text file store: line i of the file is the task at index i.

    - append() only ever adds one line at the end
    - replace_line()/delete_line() copy the file into a temp file next to it
      and swap it in with a single os.replace
    - nothing is cached; every call goes to disk

    All filesystem failures are re-raised as StorageError.
    """

    def __init__(self, path: str | Path = "data/duker.txt") -> None:
        self._path = Path(path)
        self.load_messages: list[str] = []

    # ---- low-level helpers ----

    def _ensure_file(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._path.touch()
            logger.info("Created empty task file %s", self._path)

    def _read_lines(self) -> list[str]:
        with open(self._path, encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f]

    def _write_lines(self, lines: Iterable[str]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
            if self._path.exists():
                # mkstemp creates 0600; keep the mode the file already had
                shutil.copymode(self._path, tmp)
            os.replace(tmp, self._path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise

    # ---- public API ----

    def load_all(self) -> list[Task]:
        """
        Read and decode every line.

        A line that cannot be decoded is logged, reported in `load_messages`
        and left out. If anything was left out, the original file is copied to
        <name>.bak and the file is rewritten from the tasks that did load, so the
        line/index correspondence holds again.
        """
        self.load_messages = []
        try:
            self._ensure_file()
            lines = self._read_lines()
        except OSError as e:
            logger.exception("Failed to read task file %s", self._path)
            raise StorageError(f"Could not read {self._path}: {e}") from e

        tasks: list[Task] = []
        dropped = False
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                dropped = True
                continue
            try:
                tasks.append(decode(line))
            except (FormatError, DateFormatError) as e:
                logger.warning("Skipping line %d of %s: %s", lineno, self._path, e)
                self.load_messages.append(f"Skipped unreadable line {lineno}: {line}")
                dropped = True

        if dropped:
            try:
                self._compact(tasks)
            except StorageError as e:
                # keep what was loaded; the next write is reported again
                self.load_messages.append(str(e))

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def _compact(self, tasks: list[Task]) -> None:
        backup = self._path.with_name(self._path.name + ".bak")
        try:
            shutil.copyfile(self._path, backup)
            self._write_lines(encode(t) for t in tasks)
        except OSError as e:
            logger.exception("Failed to compact task file %s", self._path)
            raise StorageError(f"Could not rewrite {self._path}: {e}") from e
        logger.warning("Rewrote %s without unreadable lines (backup: %s)", self._path, backup)

    def append(self, task: Task) -> None:
        line = encode(task)
        try:
            self._ensure_file()
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.exception("Failed to append to %s", self._path)
            raise StorageError(f"Could not write {self._path}: {e}") from e
        logger.debug("Appended line: %s", line)

    def replace_line(self, index: int, task: Task) -> None:
        new_line = encode(task)

        def substituted(lines: list[str]) -> Iterable[str]:
            for i, line in enumerate(lines):
                yield new_line if i == index else line

        self._rewrite_with(index, substituted, "replace")
        logger.debug("Replaced line %d: %s", index, new_line)

    def delete_line(self, index: int) -> None:
        def without(lines: list[str]) -> Iterable[str]:
            return (line for i, line in enumerate(lines) if i != index)

        self._rewrite_with(index, without, "delete")
        logger.debug("Deleted line %d", index)

    def rewrite(self, tasks: list[Task]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._write_lines(encode(t) for t in tasks)
        except OSError as e:
            logger.exception("Failed to rewrite %s", self._path)
            raise StorageError(f"Could not write {self._path}: {e}") from e
        logger.debug("Rewrote %s with %d tasks", self._path, len(tasks))

    def _rewrite_with(
        self,
        index: int,
        transform: Callable[[list[str]], Iterable[str]],
        action: str,
    ) -> None:
        try:
            self._ensure_file()
            lines = self._read_lines()
        except OSError as e:
            logger.exception("Failed to read %s", self._path)
            raise StorageError(f"Could not read {self._path}: {e}") from e
        if not 0 <= index < len(lines):
            # memory and disk disagree; leave the file alone
            logger.warning(
                "Cannot %s line %d: %s has %d lines", action, index + 1, self._path, len(lines)
            )
            raise StorageError(
                f"Cannot {action} line {index + 1}: {self._path} has {len(lines)} lines"
            )
        try:
            self._write_lines(transform(lines))
        except OSError as e:
            logger.exception("Failed to %s line %d in %s", action, index, self._path)
            raise StorageError(f"Could not write {self._path}: {e}") from e
