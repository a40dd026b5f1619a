# src/tasklist/tasks/task_api.py

"""
One call per command: load the document, run a single store operation,
save it back when the operation mutated the list.

Errors from the store (FileError, FormatError, TaskNotFound, InvalidInput)
propagate unchanged. When an operation fails nothing is written.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def add(path: str | Path, description: str) -> Task:
    store = TaskStore.load(path)
    task = store.add_task(description)
    store.save(path)
    logger.info("Added task id=%s to %s", task.id, path)
    return task


def complete(path: str | Path, task_id: int) -> Task:
    store = TaskStore.load(path)
    task = store.complete_task(task_id)
    store.save(path)
    logger.info("Completed task id=%s in %s", task_id, path)
    return task


def remove(path: str | Path, task_id: int) -> Task:
    store = TaskStore.load(path)
    task = store.remove_task(task_id)
    store.save(path)
    logger.info("Removed task id=%s from %s", task_id, path)
    return task


def list_all(path: str | Path) -> list[Task]:
    return TaskStore.load(path).list_tasks()


def list_completed(path: str | Path) -> list[Task]:
    return TaskStore.load(path).list_completed_tasks()
