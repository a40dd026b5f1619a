# src/tasklist/tasks/task_errors.py

"""
Errors raised by the task store and the task API.

Every failure is surfaced to the caller; nothing here is recovered from
internally. The CLI is the only layer that turns these into messages and
exit codes.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for all task list failures."""


class FileError(TaskError):
    """Reading or writing the tasks document failed."""

    label = "File Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class FormatError(FileError):
    """The tasks document exists but is not a valid serialized task list."""

    label = "Format Error"


class TaskNotFound(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task with ID {self.task_id} not found"


class InvalidInput(TaskError, ValueError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Invalid Input: {self.message}"
