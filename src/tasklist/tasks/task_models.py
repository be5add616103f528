# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ValidationError

STRIKE = "\u0336"  # combining long stroke overlay


@dataclass(slots=True)
class Task:
    """
    A named unit of work with a one-way open -> complete status.

    `id` is the surrogate key assigned by the store; None until inserted.
    The name must be non-blank and encodable as UTF-8 (SQLite TEXT).
    """

    name: str
    status: bool = False
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Task should have a name", field="name")
        try:
            self.name.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValidationError("Task name is not valid text", field="name") from exc

    @classmethod
    def new(cls, name: str) -> Task:
        return cls(name=(name or "").strip())

    def display_label(self) -> str:
        if not self.status:
            return self.name
        return "".join(f"{c}{STRIKE}" for c in self.name)
