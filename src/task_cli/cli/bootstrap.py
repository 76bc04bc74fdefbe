# src/task_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the file-backed TaskStore into AppState,
- loads the task list (once per process) and saves it back (at most once).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load the task list.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    state = AppState(settings=settings, task_store=store)
    state.tasks = store.load()
    logger.debug("State ready tasks=%d path=%s", len(state.tasks), settings.tasks_path)
    return state


def persist_state(state: AppState) -> bool:
    """Save the task list if a command changed it. Returns False only on a failed write."""
    if not state.dirty:
        return True
    ok = state.task_store.save(state.tasks)
    if ok:
        state.dirty = False
    return ok
