# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "Name shown in the welcome banner (default: Todo App).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Paths
    "TASKLIST_DATA_DIR": "Local data directory (default: data).",
    "TASKLIST_DB_PATH": "SQLite task database (default: <data_dir>/tasks.db).",
    "TASKLIST_LOG_DIR": "Directory for tasklist.log (default: <data_dir>).",
    # Error policy
    "TASKLIST_ABORT_ON_STORE_ERROR": "Exit on a store error during a menu action instead of "
    "returning to the menu (true/false, default: false).",
}
