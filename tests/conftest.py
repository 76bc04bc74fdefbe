# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_cli.core.state import AppState
from task_cli.tasks.task_models import Task, TaskStatus
from task_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="task-cli-test",
        log_level="WARNING",
        log_file=None,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, task_store=TaskStore(settings.tasks_path))


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(
            id=1,
            description="Buy milk",
            status=TaskStatus.TODO,
            created_at=datetime(2024, 5, 1, 9, 30, 0),
            updated_at=datetime(2024, 5, 1, 9, 30, 0),
        ),
        Task(
            id=2,
            description='Say "hi"\n\tthen leave \\ quietly',
            status=TaskStatus.IN_PROGRESS,
            created_at=datetime(2024, 5, 2, 18, 5, 7),
            updated_at=datetime(2024, 5, 3, 0, 0, 1),
        ),
        Task(
            id=7,
            description="Ship {release} notes",
            status=TaskStatus.DONE,
            created_at=datetime(2023, 12, 31, 23, 59, 59),
            updated_at=datetime(2024, 1, 1, 0, 0, 0),
        ),
    ]
