# src/task_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import Task
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any
    task_store: TaskRepo

    tasks: list[Task] = field(default_factory=list)
    # Set by mutating commands; main() saves once at exit when True.
    dirty: bool = False

    def mark_dirty(self) -> None:
        self.dirty = True
