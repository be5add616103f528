# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- opens the task store and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Raises StorageUnavailable when the task database cannot be opened.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_db_path),
    )


def shutdown(state: AppState) -> None:
    """Close the store handle opened by create_initial_state."""
    try:
        state.task_store.close()
    except Exception:
        logger.debug("Task store close failed.", exc_info=True)
