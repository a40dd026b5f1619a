# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a
.env file in the working directory). Command-line flags override both:
- --file overrides TASKLIST_TASKS_PATH
- --log-level overrides TASKLIST_LOG_LEVEL
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in log lines (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKLIST_LOG_FILE": "Optional log file path; unset disables file logging.",
    # Storage
    "TASKLIST_TASKS_PATH": "Tasks JSON document (default: tasks.json).",
}
