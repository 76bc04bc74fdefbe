# src/task_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task list once, runs one command, then saves
the list once if the command changed it.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, persist_state
from ..cli.commands import CommandError, registry
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_file=getattr(settings, "log_file", None), console_level=console_level)

    logger.debug("Starting %s argv=%s", getattr(settings, "app_name", "task-cli"), argv)

    state = create_initial_state(settings=settings)

    try:
        reply = registry.handle(state, argv)
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(reply)

    if not persist_state(state):
        print(f"Error: could not save tasks to {settings.tasks_path}.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
