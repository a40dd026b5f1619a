# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..tasks import task_api
from ..tasks.task_errors import InvalidInput
from ..tasks.task_models import Task

# settings only needs a `tasks_path` attribute (Settings or a test stand-in).
CommandHandler = Callable[[Any, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Subcommand registry used by the CLI entrypoint (add, list, complete, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, settings: Any, name: str, args: list[str]) -> str:
        """
        Run the command `name` with its positional `args`.
        Returns the text to print. Raises InvalidInput for unknown commands;
        task errors from the handler propagate unchanged.
        """
        handler = self._handlers.get(name.lower())
        if not handler:
            raise InvalidInput(f"Unknown command: {name}. Use 'help' to list available commands.")

        logger.debug("Dispatching command=%s args=%s", name, args)
        return handler(settings, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"{task.id}. [{mark}] - {task.description}"


def _format_listing(header: str, tasks: Iterable[Task]) -> str:
    lines = [header]
    lines.extend(format_task(t) for t in tasks)
    if len(lines) == 1:
        lines.append("No tasks.")
    return "\n".join(lines)


def _parse_id(args: list[str], usage: str) -> int:
    if len(args) != 1:
        raise InvalidInput(f"Usage: {usage}")
    raw = args[0].strip()
    if not (raw.isascii() and raw.isdigit()) or int(raw) < 1:
        raise InvalidInput(f"Task ID must be a positive integer, got {args[0]!r}")
    return int(raw)


def cmd_help(settings: Any, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(settings: Any, args: list[str]) -> str:
    """
    add <description...>

    A single argument is stored verbatim; several are joined with spaces
    (so `add Buy milk` works without quoting).
    """
    if not args:
        raise InvalidInput("Usage: add <description>")
    description = args[0] if len(args) == 1 else " ".join(args)
    task_api.add(settings.tasks_path, description)
    return f"Adding task: {description}"


def cmd_list(settings: Any, args: list[str]) -> str:
    return _format_listing("Listing all tasks", task_api.list_all(settings.tasks_path))


def cmd_list_completed(settings: Any, args: list[str]) -> str:
    return _format_listing(
        "Listing all completed tasks", task_api.list_completed(settings.tasks_path)
    )


def cmd_complete(settings: Any, args: list[str]) -> str:
    task_id = _parse_id(args, "complete <id>")
    task_api.complete(settings.tasks_path, task_id)
    return f"Completing task with ID: {task_id}"


def cmd_remove(settings: Any, args: list[str]) -> str:
    task_id = _parse_id(args, "remove <id>")
    task_api.remove(settings.tasks_path, task_id)
    return f"Removing task with ID: {task_id}"


registry.register("add", cmd_add, help_text="Add a new task: add <description>.")
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register(
    "list-completed", cmd_list_completed, help_text="List only completed tasks.", aliases=["done"]
)
registry.register("complete", cmd_complete, help_text="Mark a task as completed: complete <id>.")
registry.register("remove", cmd_remove, help_text="Remove a task by its ID: remove <id>.", aliases=["rm"])
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
