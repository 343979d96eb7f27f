# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "YARR_APP_NAME": "Name shown in front of replies (default: yarr).",
    "YARR_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "YARR_LOG_DIR": "Directory for yarr.log (default: <data_dir>).",
    # Console
    "YARR_CONSOLE_TIMESTAMPS": "Prefix console lines with a local timestamp (true/false, default: true).",
    # Paths (gitignored)
    "YARR_DATA_DIR": "Local data directory (default: .local/yarr).",
    "YARR_TASKS_DB_PATH": "Task list SQLite path (default: <data_dir>/tasks.sqlite3).",
}
