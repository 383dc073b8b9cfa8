# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "DUKER_APP_NAME": "Name used in the greeting (default: Duker).",
    "DUKER_LOG_LEVEL": "Console logging level (default: WARNING).",
    "DUKER_LOG_TO_FILE": "Write full DEBUG logs to <log_dir>/duker.log (true/false, default: true).",
    # Paths
    "DUKER_DATA_DIR": "Local data directory (default: data).",
    "DUKER_TASKS_FILE": "Task file path (default: <data_dir>/duker.txt).",
    "DUKER_LOG_DIR": "Directory for duker.log (default: <data_dir>).",
}
