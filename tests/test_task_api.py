# tests/test_task_api.py

from __future__ import annotations

from datetime import datetime

import pytest

from task_cli.tasks.task_api import (
    TaskNotFoundError,
    add_task,
    delete_task,
    filter_tasks,
    find_task,
    mark_task_status,
    next_task_id,
    update_task,
)
from task_cli.tasks.task_models import Task, TaskStatus

NOW = datetime(2024, 6, 1, 12, 0, 0, 123456)


def test_next_task_id() -> None:
    assert next_task_id([]) == 1


def test_next_task_id_uses_max_not_length(sample_tasks: list[Task]) -> None:
    assert next_task_id(sample_tasks) == 8


def test_add_task_appends_todo_with_equal_timestamps(sample_tasks: list[Task]) -> None:
    task = add_task(sample_tasks, "Water plants", now=NOW)
    assert sample_tasks[-1] is task
    assert task.id == 8
    assert task.status is TaskStatus.TODO
    assert task.created_at == task.updated_at == datetime(2024, 6, 1, 12, 0, 0)


def test_add_task_rejects_blank_description() -> None:
    with pytest.raises(ValueError):
        add_task([], "   ")


def test_update_task(sample_tasks: list[Task]) -> None:
    created = sample_tasks[0].created_at
    task = update_task(sample_tasks, 1, "Buy oat milk", now=NOW)
    assert task.description == "Buy oat milk"
    assert task.created_at == created
    assert task.updated_at == datetime(2024, 6, 1, 12, 0, 0)


def test_mark_task_status(sample_tasks: list[Task]) -> None:
    task = mark_task_status(sample_tasks, 7, TaskStatus.TODO, now=NOW)
    assert task.status is TaskStatus.TODO
    assert task.updated_at == datetime(2024, 6, 1, 12, 0, 0)


def test_delete_task_keeps_order_of_the_rest(sample_tasks: list[Task]) -> None:
    removed = delete_task(sample_tasks, 2)
    assert removed.id == 2
    assert [t.id for t in sample_tasks] == [1, 7]
    assert find_task(sample_tasks, 2) is None


def test_unknown_id_raises(sample_tasks: list[Task]) -> None:
    with pytest.raises(TaskNotFoundError):
        update_task(sample_tasks, 42, "x")
    with pytest.raises(TaskNotFoundError):
        delete_task(sample_tasks, 42)
    with pytest.raises(TaskNotFoundError):
        mark_task_status(sample_tasks, 42, TaskStatus.DONE)
    assert len(sample_tasks) == 3


def test_filter_tasks(sample_tasks: list[Task]) -> None:
    assert filter_tasks(sample_tasks) == sample_tasks
    assert [t.id for t in filter_tasks(sample_tasks, TaskStatus.DONE)] == [7]
    assert filter_tasks(sample_tasks[:1], TaskStatus.DONE) == []
