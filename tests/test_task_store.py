# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from duker.core.errors import StorageError
from duker.tasks.task_models import Deadline, Todo
from duker.tasks.task_store import TaskFileStore


def _read(path: Path) -> list[str]:
    return path.read_text("utf-8").splitlines()


def test_load_creates_missing_dir_and_file(tmp_path: Path) -> None:
    path = tmp_path / "data" / "duker.txt"
    store = TaskFileStore(path)

    assert store.load_all() == []
    assert path.exists()
    assert path.read_text("utf-8") == ""


def test_append_replace_delete_keep_line_order(tmp_path: Path) -> None:
    path = tmp_path / "duker.txt"
    store = TaskFileStore(path)
    store.load_all()

    a, b, c = Todo("a"), Deadline("b", datetime(2024, 3, 1, 18, 0)), Todo("c")
    for t in (a, b, c):
        store.append(t)
    assert _read(path) == [
        "0 | T | 0 | a",
        "0 | D | 0 | b | 2024-03-01T18:00",
        "0 | T | 0 | c",
    ]

    b.mark_done()
    store.replace_line(1, b)
    assert _read(path)[1] == "0 | D | 1 | b | 2024-03-01T18:00"

    store.delete_line(0)
    assert _read(path) == ["0 | D | 1 | b | 2024-03-01T18:00", "0 | T | 0 | c"]

    # no temp files left behind
    assert sorted(p.name for p in tmp_path.iterdir()) == ["duker.txt"]


def test_load_round_trips_appended_tasks(tmp_path: Path) -> None:
    path = tmp_path / "duker.txt"
    store = TaskFileStore(path)
    written = [Todo("x", done=True), Deadline("y", datetime(2030, 1, 2, 3, 4), high_priority=True)]
    for t in written:
        store.append(t)

    assert TaskFileStore(path).load_all() == written


def test_unreadable_lines_are_skipped_and_file_compacted(tmp_path: Path) -> None:
    path = tmp_path / "duker.txt"
    path.write_text(
        "0 | T | 0 | keep me\n"
        "0 | Q | 0 | bad tag\n"
        "\n"
        "0 | D | 0 | bad date | yesterday\n"
        "1 | T | 1 | keep me too\n",
        "utf-8",
    )
    store = TaskFileStore(path)

    tasks = store.load_all()

    assert [t.description for t in tasks] == ["keep me", "keep me too"]
    assert len(store.load_messages) == 2
    assert "line 2" in store.load_messages[0]
    assert _read(path) == ["0 | T | 0 | keep me", "1 | T | 1 | keep me too"]
    # original content is kept next to the file
    assert "bad tag" in (tmp_path / "duker.txt.bak").read_text("utf-8")


def test_clean_file_is_not_rewritten(tmp_path: Path) -> None:
    path = tmp_path / "duker.txt"
    path.write_text("0 | T | 0 | a\n", "utf-8")
    store = TaskFileStore(path)
    store.load_all()

    assert store.load_messages == []
    assert not (tmp_path / "duker.txt.bak").exists()


def test_rewrite_replaces_everything(tmp_path: Path) -> None:
    path = tmp_path / "duker.txt"
    path.write_text("0 | T | 0 | old\n", "utf-8")
    TaskFileStore(path).rewrite([Todo("new")])
    assert _read(path) == ["0 | T | 0 | new"]


def test_unreadable_file_raises_storage_error(tmp_path: Path) -> None:
    # a directory where the file should be
    path = tmp_path / "duker.txt"
    path.mkdir()
    store = TaskFileStore(path)

    with pytest.raises(StorageError):
        store.load_all()
    with pytest.raises(StorageError):
        store.append(Todo("x"))


def test_rewrites_keep_file_mode(tmp_path: Path) -> None:
    path = tmp_path / "duker.txt"
    path.write_text("0 | T | 0 | a\n0 | T | 0 | b\n", "utf-8")
    path.chmod(0o644)
    store = TaskFileStore(path)
    store.load_all()

    store.replace_line(0, Todo("a", done=True))
    assert path.stat().st_mode & 0o777 == 0o644
    store.delete_line(1)
    assert path.stat().st_mode & 0o777 == 0o644
    store.rewrite([Todo("c")])
    assert path.stat().st_mode & 0o777 == 0o644


def test_line_past_end_of_file_raises_and_leaves_file(tmp_path: Path) -> None:
    path = tmp_path / "duker.txt"
    path.write_text("0 | T | 0 | only\n", "utf-8")
    store = TaskFileStore(path)

    with pytest.raises(StorageError):
        store.replace_line(3, Todo("x"))
    with pytest.raises(StorageError):
        store.delete_line(3)
    assert _read(path) == ["0 | T | 0 | only"]
