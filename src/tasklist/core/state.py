# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are typed loosely so tests can pass a SimpleNamespace.
    settings: object
    task_store: TaskRepo
