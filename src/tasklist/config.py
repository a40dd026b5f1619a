# src/tasklist/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Every value has a default, so a bare `tasklist list` works with no setup.
- Command-line flags (--file, --log-level) override what is read here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

DEFAULT_TASKS_PATH = Path("tasks.json")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    tasks_path: Path

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(dotenv_path=Path(".env"), override=False)

        app_name = os.getenv(_k("APP_NAME"), "").strip() or "tasklist"
        log_level = os.getenv(_k("LOG_LEVEL"), "").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"))
        tasks_path = _env_path(_k("TASKS_PATH"), DEFAULT_TASKS_PATH)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            tasks_path=tasks_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
