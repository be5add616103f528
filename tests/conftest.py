# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the shell.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Todo App",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "data" / "tasks.db",
        log_dir=tmp_path / "logs",
        abort_on_store_error=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace):
    s = TaskStore(settings.tasks_db_path)
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real SQLite store in tmp_path.
    """
    return AppState(settings=settings, task_store=store)
