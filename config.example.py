# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

Usage:
  task-cli add "Buy milk"
  task-cli update 1 "Buy oat milk"
  task-cli mark-in-progress 1
  task-cli mark-done 1
  task-cli list done
  task-cli delete 1
"""

ENV_VARS = {
    # App / logging
    "TASK_CLI_APP_NAME": "App display name used in log lines (default: task-cli).",
    "TASK_CLI_LOG_LEVEL": "Console logging level (default: WARNING; INFO shows load/save summaries).",
    "TASK_CLI_LOG_FILE": "Optional log file receiving DEBUG+ records (default: no file log).",
    # Paths
    "TASK_CLI_DATA_DIR": "Directory holding the tasks file (default: current directory).",
    "TASK_CLI_TASKS_PATH": "Tasks file path (default: <data_dir>/tasks.json).",
}
