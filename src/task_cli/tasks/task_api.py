# src/task_cli/tasks/task_api.py

from __future__ import annotations

import logging
from datetime import datetime

from ..storage.timestamps import now_local
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


def _stamp(now: datetime | None) -> datetime:
    return (now or now_local()).replace(microsecond=0)


def next_task_id(tasks: list[Task]) -> int:
    """Max existing id + 1 (1 for an empty list)."""
    if not tasks:
        return 1
    return max(t.id for t in tasks) + 1


def find_task(tasks: list[Task], task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def _require(tasks: list[Task], task_id: int) -> Task:
    task = find_task(tasks, task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def add_task(tasks: list[Task], description: str, *, now: datetime | None = None) -> Task:
    if not description or not description.strip():
        raise ValueError("description is required")

    ts = _stamp(now)
    task = Task(
        id=next_task_id(tasks),
        description=description,
        status=TaskStatus.TODO,
        created_at=ts,
        updated_at=ts,
    )
    tasks.append(task)
    logger.debug("Task added id=%s", task.id)
    return task


def update_task(
    tasks: list[Task], task_id: int, description: str, *, now: datetime | None = None
) -> Task:
    if not description or not description.strip():
        raise ValueError("description is required")

    task = _require(tasks, task_id)
    task.description = description
    task.updated_at = _stamp(now)
    logger.debug("Task updated id=%s", task_id)
    return task


def delete_task(tasks: list[Task], task_id: int) -> Task:
    """Remove every task carrying `task_id`; returns the first one removed."""
    removed = _require(tasks, task_id)
    tasks[:] = [t for t in tasks if t.id != task_id]
    logger.debug("Task deleted id=%s", task_id)
    return removed


def mark_task_status(
    tasks: list[Task], task_id: int, status: TaskStatus, *, now: datetime | None = None
) -> Task:
    task = _require(tasks, task_id)
    task.status = status
    task.updated_at = _stamp(now)
    logger.debug("Task id=%s marked %s", task_id, status)
    return task


def filter_tasks(tasks: list[Task], status: TaskStatus | None = None) -> list[Task]:
    if status is None:
        return list(tasks)
    return [t for t in tasks if t.status == status]
