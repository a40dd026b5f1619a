# src/tasklist/cli/main.py

"""
CLI entrypoint.

Parses the global flags, initializes logging, then runs exactly one
subcommand through the command registry:
- mutating commands (add/complete/remove) load, change and save the tasks document,
- queries (list/list-completed) load and print.

Any TaskError is reported as "Error: ..." on stderr with exit status 1.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_errors import TaskError

logger = logging.getLogger(__name__)


def build_parser(default_tasks_path: Path) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="A simple task list / todo CLI application.",
        epilog=command_registry.build_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=default_tasks_path,
        help=f"Tasks document to read and write (default: {default_tasks_path}).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Console log level (DEBUG, INFO, WARNING, ...).",
    )
    parser.add_argument("command", nargs="?", default="help", help="Command to run.")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments.")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = build_parser(settings.tasks_path)
    ns = parser.parse_args(argv)

    level_name = str(ns.log_level or settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(log_file=settings.log_file, console_level=console_level)

    # --file wins over TASKLIST_TASKS_PATH
    settings = dataclasses.replace(settings, tasks_path=ns.file)
    logger.debug("Starting %s command=%s file=%s", settings.app_name, ns.command, settings.tasks_path)

    try:
        output = command_registry.handle(settings, ns.command, list(ns.args))
    except TaskError as e:
        logger.debug("Command %s failed.", ns.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
