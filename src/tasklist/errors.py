# src/tasklist/errors.py

"""
Error taxonomy for the task list.

Every error carries an ErrorKind tag so callers can pick a recovery policy:
- startup: the store could not be opened (fatal)
- operation: a single store call failed (the shell can return to the menu)
- validation: user input was rejected before reaching the store
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    STARTUP = "startup"
    OPERATION = "operation"
    VALIDATION = "validation"


class TaskListError(Exception):
    """Base application error with a kind tag and structured context."""

    kind: ErrorKind = ErrorKind.OPERATION

    def __init__(self, detail: str, **context: Any) -> None:
        self.detail = detail
        self.context = context
        super().__init__(detail)


class StorageUnavailable(TaskListError):
    """The task database could not be opened or initialized."""

    kind = ErrorKind.STARTUP


class StorageError(TaskListError):
    """A single store operation failed."""

    kind = ErrorKind.OPERATION


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


class ValidationError(TaskListError):
    kind = ErrorKind.VALIDATION

    def __init__(self, detail: str, field: str | None = None) -> None:
        super().__init__(detail, field=field)
        self.field = field
