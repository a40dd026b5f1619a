# src/tasklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path
from typing import Any

from .task_errors import FileError, FormatError, InvalidInput, TaskNotFound
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list persisted as one JSON document.

    Document layout:
      {"tasks": [{"id": 1, "description": "...", "completed": false}, ...], "next_id": 2}

    Invariants:
    - tasks keep insertion order; no operation reorders them
    - every id is unique and strictly below next_id
    - next_id only grows, so ids are never handed out twice (even after removal)

    The store holds no file handle: load() reads the whole document, save() rewrites it.
    """

    def __init__(self, tasks: Iterable[Task] = (), next_id: int = 1) -> None:
        self._tasks: list[Task] = list(tasks)
        self._next_id = int(next_id)

    @classmethod
    def new(cls) -> TaskStore:
        return cls()

    def __repr__(self) -> str:
        return f"TaskStore(tasks={len(self._tasks)}, next_id={self._next_id})"

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [t.to_dict() for t in self._tasks], "next_id": self._next_id}

    @classmethod
    def from_dict(cls, data: Any) -> TaskStore:
        """
        Rebuild a store from a decoded document.

        next_id is taken as persisted, never re-derived from the highest id,
        so {"tasks": [], "next_id": 50} comes back with next_id == 50.
        Unknown keys are ignored. Anything else unexpected raises FormatError.
        """
        if not isinstance(data, dict):
            raise FormatError(f"expected a JSON object, got {type(data).__name__}")
        if "tasks" not in data:
            raise FormatError("missing field 'tasks'")
        if "next_id" not in data:
            raise FormatError("missing field 'next_id'")

        raw_tasks = data["tasks"]
        if not isinstance(raw_tasks, list):
            raise FormatError("'tasks' must be a list")
        next_id = _positive_int(data["next_id"], "next_id")

        tasks: list[Task] = []
        seen: set[int] = set()
        for pos, raw in enumerate(raw_tasks):
            task = _task_from_dict(raw, pos)
            if task.id in seen:
                raise FormatError(f"duplicate task id {task.id}")
            if task.id >= next_id:
                raise FormatError(f"task id {task.id} is not below next_id {next_id}")
            seen.add(task.id)
            tasks.append(task)

        return cls(tasks, next_id)

    # ---- persistence ----

    @classmethod
    def load(cls, path: str | Path) -> TaskStore:
        """
        Load the store persisted at `path`.

        A missing document is not an error: it yields an empty store (next_id = 1).
        Raises FileError when the document cannot be read and FormatError when
        its content is not a serialized task list.
        """
        path = Path(path)
        try:
            raw = path.read_text("utf-8")
        except (FileNotFoundError, NotADirectoryError):
            logger.debug("No tasks document at %s; starting empty.", path)
            return cls.new()
        except UnicodeDecodeError as e:
            raise FormatError(f"{path} is not UTF-8 text") from e
        except OSError as e:
            raise FileError(f"failed to read {path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FormatError(f"{path} is not valid JSON: {e}") from e
        except RecursionError as e:
            raise FormatError(f"{path} is nested too deeply to decode") from e

        try:
            store = cls.from_dict(data)
        except FormatError as e:
            raise FormatError(f"{path}: {e.message}") from e

        logger.debug(
            "Loaded %d task(s) from %s next_id=%s", store.count_tasks(), path, store.next_id
        )
        return store

    def save(self, path: str | Path) -> None:
        """
        Write the whole store to `path`.

        The document goes to a sibling temp file first and is then moved over the
        target with os.replace, so a failed write leaves the previous content alone.
        """
        path = Path(path)
        payload = json.dumps(self.to_dict(), ensure_ascii=False, indent=2) + "\n"
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise FileError(f"failed to write {path}: {e}") from e

        logger.debug("Saved %d task(s) to %s next_id=%s", len(self._tasks), path, self._next_id)

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise TaskNotFound(task_id)

    # ---- public API ----

    @property
    def next_id(self) -> int:
        return self._next_id

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, description: str) -> Task:
        if not isinstance(description, str) or not description.strip():
            raise InvalidInput("Task description cannot be empty")

        task = Task(id=self._next_id, description=description, completed=False)
        self._tasks.append(task)
        self._next_id += 1
        logger.debug("Task added id=%s next_id=%s", task.id, self._next_id)
        return task

    def complete_task(self, task_id: int) -> Task:
        """Mark a task completed. Completing an already completed task is a no-op."""
        i = self._index_of(task_id)
        task = self._tasks[i]
        if task.completed:
            return task

        task = replace(task, completed=True)
        self._tasks[i] = task
        logger.debug("Task completed id=%s", task_id)
        return task

    def remove_task(self, task_id: int) -> Task:
        i = self._index_of(task_id)
        task = self._tasks.pop(i)
        logger.debug("Task removed id=%s remaining=%d", task_id, len(self._tasks))
        return task

    def get_task(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def list_tasks(self) -> list[Task]:
        """All tasks in insertion order (a fresh list of immutable values)."""
        return list(self._tasks)

    def list_completed_tasks(self) -> list[Task]:
        return [t for t in self._tasks if t.completed]


def _positive_int(value: Any, field: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"'{field}' must be an integer, got {type(value).__name__}")
    if value < 1:
        raise FormatError(f"'{field}' must be positive, got {value}")
    return value


def _task_from_dict(raw: Any, pos: int) -> Task:
    if not isinstance(raw, dict):
        raise FormatError(f"tasks[{pos}] must be an object")
    for key in ("id", "description", "completed"):
        if key not in raw:
            raise FormatError(f"tasks[{pos}] is missing field '{key}'")

    task_id = _positive_int(raw["id"], f"tasks[{pos}].id")

    description = raw["description"]
    if not isinstance(description, str):
        raise FormatError(f"tasks[{pos}].description must be a string")
    if not description.strip():
        raise FormatError(f"tasks[{pos}].description is empty")

    completed = raw["completed"]
    if not isinstance(completed, bool):
        raise FormatError(f"tasks[{pos}].completed must be a boolean")

    return Task(id=task_id, description=description, completed=completed)
