# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.tasks.task_store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    """Tasks document location inside the per-test tmp dir (not created yet)."""
    return tmp_path / "tasks.json"


@pytest.fixture()
def settings(tasks_path: Path) -> SimpleNamespace:
    """
    Minimal settings object for command handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasklist",
        log_level="WARNING",
        log_file=None,
        tasks_path=tasks_path,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore.new()


@pytest.fixture()
def restore_root_logging():
    """Undo setup_logging() so handlers bound to captured streams do not leak."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
