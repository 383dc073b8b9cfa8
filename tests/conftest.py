# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from duker.cli.bootstrap import create_initial_state
from duker.core.session import Session
from duker.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Duker",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_file=data_dir / "duker.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState backed by a real task file under tmp_path."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def session(state: AppState) -> Session:
    return Session(state)


@pytest.fixture()
def file_lines(settings: SimpleNamespace):
    """Read the task file the way a user would see it in an editor."""

    def read() -> list[str]:
        return settings.tasks_file.read_text("utf-8").splitlines()

    return read
