# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import Task

Emitter = Callable[[str], None]
Prompt = Callable[[str], str]
MenuHandler = Callable[[AppState, Prompt, Emitter], str | None]

INDEX_OUT_OF_RANGE = "Index out of range."
INVALID_CHOICE = "Invalid choice!"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler | None


class MenuRegistry:
    """
    Numbered main-menu registry used by the console shell.

    Entries are shown in registration order. An entry without a handler
    ends the loop (Exit). The first entry is the default for empty input.
    """

    def __init__(self) -> None:
        self._entries: dict[str, MenuEntry] = {}

    def register(self, key: str, label: str, handler: MenuHandler | None) -> None:
        self._entries[key] = MenuEntry(key=key, label=label, handler=handler)

    def entries(self) -> list[MenuEntry]:
        return list(self._entries.values())

    @property
    def default_key(self) -> str | None:
        return next(iter(self._entries), None)

    def is_exit(self, choice: str) -> bool:
        entry = self._entries.get(choice.strip())
        return entry is not None and entry.handler is None

    def handle(self, state: AppState, choice: str, prompt: Prompt, emit: Emitter) -> str | None:
        """
        Run the handler for a menu choice like "2".
        Returns a notice to show on the next redraw, or None.
        """
        entry = self._entries.get(choice.strip())
        if entry is None:
            return INVALID_CHOICE
        if entry.handler is None:
            return None
        logger.debug("Menu action %s (%s)", entry.key, entry.label)
        return entry.handler(state, prompt, emit)

    def render(self) -> list[str]:
        return [f"{e.key}. {e.label}" for e in self._entries.values()]


registry = MenuRegistry()


def select_task(tasks: list[Task], prompt: Prompt, emit: Emitter) -> tuple[Task | None, str | None]:
    """
    Sub-menu: "0. Continue" followed by every task label.

    Returns (picked task, notice). Both are None when the user continues.
    Empty input selects Continue.
    """
    emit("0. Continue")
    for i, task in enumerate(tasks, start=1):
        emit(f"{i}. {task.display_label()}")

    raw = prompt("> ").strip()
    if not raw:
        return None, None
    try:
        idx = int(raw)
    except ValueError:
        return None, INVALID_CHOICE

    if idx == 0:
        return None, None
    if 1 <= idx <= len(tasks):
        return tasks[idx - 1], None
    return None, INDEX_OUT_OF_RANGE


def cmd_add(state: AppState, prompt: Prompt, emit: Emitter) -> str | None:
    emit("Enter task name:")
    task = Task.new(prompt("> "))
    state.task_store.add_task(task)
    return f"Added: {task.name}"


def cmd_view(state: AppState, prompt: Prompt, emit: Emitter) -> str | None:
    emit("-----------")
    emit("Todo tasks:")
    emit("-----------")

    tasks = state.task_store.list_tasks()
    if not tasks:
        emit("No tasks!")

    _, notice = select_task(tasks, prompt, emit)
    return notice


def cmd_remove(state: AppState, prompt: Prompt, emit: Emitter) -> str | None:
    emit("Select a task to remove:")
    tasks = state.task_store.list_tasks()
    task, notice = select_task(tasks, prompt, emit)
    if task is None:
        return notice

    if task.id is None:
        state.task_store.remove_task(task.name)
    else:
        state.task_store.remove_task_by_id(task.id)
    return f"Removed: {task.name}"


def cmd_mark_complete(state: AppState, prompt: Prompt, emit: Emitter) -> str | None:
    emit("Select a task to mark as complete:")
    tasks = state.task_store.list_tasks()
    task, notice = select_task(tasks, prompt, emit)
    if task is None:
        return notice

    if task.id is None:
        state.task_store.mark_complete(task.name)
    else:
        state.task_store.mark_complete_by_id(task.id)
    return f"Completed: {task.name}"


registry.register("1", "Add a task", cmd_add)
registry.register("2", "View tasks", cmd_view)
registry.register("3", "Remove tasks", cmd_remove)
registry.register("4", "Mark as complete", cmd_mark_complete)
registry.register("5", "Exit", None)
