# src/task_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands only need something that can load the whole list once and save it
once; tests can swap in an in-memory repo.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> bool: ...
