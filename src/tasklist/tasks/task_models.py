# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - id is assigned by the store and never changes.
    - description is kept exactly as supplied (trimming is only used for validation).
    - completed only ever goes False -> True; the store swaps in a new value.
    """

    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "completed": self.completed}
