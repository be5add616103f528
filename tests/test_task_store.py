# tests/test_task_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from tasklist.errors import (
    ErrorKind,
    StorageReadError,
    StorageUnavailable,
    StorageWriteError,
    ValidationError,
)
from tasklist.tasks.task_models import Task
from tasklist.tasks.task_store import TaskStore


def _names(store: TaskStore) -> list[tuple[str, bool]]:
    return [(t.name, t.status) for t in store.list_tasks()]


def test_fresh_store_lists_nothing(store: TaskStore) -> None:
    assert store.list_tasks() == []
    assert store.count_tasks() == 0


def test_add_then_list_is_open(store: TaskStore) -> None:
    task_id = store.add_task(Task.new("Buy milk"))
    assert task_id > 0

    tasks = store.list_tasks()
    assert len(tasks) == 1
    assert tasks[0].id == task_id
    assert tasks[0].name == "Buy milk"
    assert tasks[0].status is False


def test_add_preserves_given_status(store: TaskStore) -> None:
    store.add_task(Task(name="Already done", status=True))
    assert _names(store) == [("Already done", True)]


def test_scenario_add_complete_remove(store: TaskStore) -> None:
    store.add_task(Task.new("Buy milk"))
    store.add_task(Task.new("Write report"))
    assert _names(store) == [("Buy milk", False), ("Write report", False)]

    store.mark_complete("Buy milk")
    assert _names(store) == [("Buy milk", True), ("Write report", False)]

    store.remove_task("Write report")
    assert _names(store) == [("Buy milk", True)]


def test_mark_complete_is_idempotent_and_never_reverts(store: TaskStore) -> None:
    store.add_task(Task.new("Stretch"))
    assert store.mark_complete("Stretch") == 1
    once = _names(store)
    assert store.mark_complete("Stretch") == 1
    assert _names(store) == once == [("Stretch", True)]


def test_missing_name_is_silent_noop(store: TaskStore) -> None:
    store.add_task(Task.new("Keep me"))
    before = _names(store)

    assert store.remove_task("nope") == 0
    assert store.mark_complete("nope") == 0
    assert _names(store) == before


def test_name_match_is_exact_and_case_sensitive(store: TaskStore) -> None:
    store.add_task(Task.new("Report"))
    store.remove_task("report")
    store.remove_task("Report ")
    assert _names(store) == [("Report", False)]


def test_duplicates_accepted_and_name_ops_hit_all_matches(store: TaskStore) -> None:
    store.add_task(Task.new("Dup"))
    store.add_task(Task.new("Dup"))
    store.add_task(Task.new("Other"))

    assert store.mark_complete("Dup") == 2
    assert _names(store) == [("Dup", True), ("Dup", True), ("Other", False)]

    assert store.remove_task("Dup") == 2
    assert _names(store) == [("Other", False)]


def test_by_id_ops_target_a_single_row(store: TaskStore) -> None:
    first = store.add_task(Task.new("Dup"))
    second = store.add_task(Task.new("Dup"))

    assert store.mark_complete_by_id(second) is True
    by_id = {t.id: t.status for t in store.list_tasks()}
    assert by_id == {first: False, second: True}

    assert store.remove_task_by_id(first) is True
    assert [t.id for t in store.list_tasks()] == [second]

    assert store.remove_task_by_id(first) is False
    assert store.mark_complete_by_id(9999) is False


def test_reopen_keeps_rows_and_schema_is_idempotent(tmp_path: Path) -> None:
    db = tmp_path / "tasks.db"
    s1 = TaskStore(db)
    s1.add_task(Task.new("Persist me"))
    s1.close()

    s2 = TaskStore(db)
    try:
        assert _names(s2) == [("Persist me", False)]
    finally:
        s2.close()


def test_schema_layout(store: TaskStore) -> None:
    conn = sqlite3.connect(str(store.db_path))
    try:
        cols = {row[1]: row for row in conn.execute("PRAGMA table_info(tasks)")}
    finally:
        conn.close()

    assert set(cols) == {"id", "name", "status"}
    assert cols["id"][5] == 1  # pk
    assert cols["name"][3] == 1  # notnull
    assert cols["status"][3] == 1
    assert cols["status"][4] == "0"


def test_creates_parent_directory(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "dir" / "tasks.db"
    s = TaskStore(db)
    s.close()
    assert db.exists()


def test_directory_path_is_unavailable(tmp_path: Path) -> None:
    with pytest.raises(StorageUnavailable) as exc_info:
        TaskStore(tmp_path)
    assert exc_info.value.kind is ErrorKind.STARTUP
    assert isinstance(exc_info.value.__cause__, sqlite3.Error)


def test_corrupt_file_is_unavailable(tmp_path: Path) -> None:
    db = tmp_path / "tasks.db"
    db.write_bytes(b"this is definitely not an sqlite database" * 100)
    with pytest.raises(StorageUnavailable):
        TaskStore(db)


def test_closed_store_raises_operation_errors(tmp_path: Path) -> None:
    s = TaskStore(tmp_path / "tasks.db")
    s.close()

    with pytest.raises(StorageReadError) as read_err:
        s.list_tasks()
    assert read_err.value.kind is ErrorKind.OPERATION

    with pytest.raises(StorageWriteError):
        s.add_task(Task.new("x"))
    with pytest.raises(StorageWriteError):
        s.remove_task("x")
    with pytest.raises(StorageWriteError):
        s.mark_complete("x")


@pytest.mark.parametrize("raw", ["", "   "])
def test_blank_task_never_creates_a_row(store: TaskStore, raw: str) -> None:
    with pytest.raises(ValidationError):
        store.add_task(Task(name=raw))
    assert store.list_tasks() == []


def test_unencodable_name_is_a_write_error(store: TaskStore) -> None:
    store.add_task(Task.new("Keep me"))

    with pytest.raises(StorageWriteError) as exc_info:
        store.remove_task("bad\udcff")
    assert isinstance(exc_info.value.__cause__, UnicodeError)

    with pytest.raises(StorageWriteError):
        store.mark_complete("bad\udcff")
    assert _names(store) == [("Keep me", False)]


def test_close_is_idempotent(tmp_path: Path) -> None:
    s = TaskStore(tmp_path / "tasks.db")
    s.close()
    s.close()
