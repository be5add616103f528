# src/tasklist/core/ports.py

"""
Ports (interfaces) used by the shell.

The menu depends on a Protocol instead of the SQLite store, so tests can
swap in an in-memory repo.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Name-based API
    def add_task(self, task: Task) -> int: ...
    def list_tasks(self) -> list[Task]: ...
    def remove_task(self, name: str) -> int: ...
    def mark_complete(self, name: str) -> int: ...

    # Surrogate-key API (used by the menu for picked rows)
    def remove_task_by_id(self, task_id: int) -> bool: ...
    def mark_complete_by_id(self, task_id: int) -> bool: ...

    def close(self) -> None: ...
