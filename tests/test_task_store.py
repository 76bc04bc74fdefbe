# tests/test_task_store.py

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import pytest

from task_cli.storage.diagnostics import DiagnosticScope
from task_cli.storage.serializer import serialize_tasks
from task_cli.tasks.task_models import Task
from task_cli.tasks.task_store import TaskStore


def test_absent_file_loads_empty(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "missing.json")
    outcome = store.load_outcome()
    assert outcome.tasks == []
    assert outcome.diagnostics == []
    assert store.load() == []


@pytest.mark.parametrize("content", ["", "   \n\t  \n"])
def test_empty_and_blank_files_load_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")
    assert TaskStore(path).load() == []


def test_save_then_load(tmp_path: Path, sample_tasks: list[Task]) -> None:
    path = tmp_path / "tasks.json"
    store = TaskStore(path)
    assert store.save(sample_tasks) is True
    assert path.read_text("utf-8") == serialize_tasks(sample_tasks)
    assert TaskStore(path).load() == sample_tasks


def test_save_truncates_previous_content(tmp_path: Path, sample_tasks: list[Task]) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("x" * 10_000, "utf-8")
    store = TaskStore(path)
    assert store.save(sample_tasks[:1])
    assert path.read_text("utf-8") == serialize_tasks(sample_tasks[:1])


def test_save_creates_parent_directory(tmp_path: Path, sample_tasks: list[Task]) -> None:
    path = tmp_path / "nested" / "dir" / "tasks.json"
    assert TaskStore(path).save(sample_tasks)
    assert TaskStore(path).load() == sample_tasks


def test_save_failure_is_reported_not_raised(
    tmp_path: Path, sample_tasks: list[Task], caplog: pytest.LogCaptureFixture
) -> None:
    target = tmp_path / "a_directory"
    target.mkdir()
    with caplog.at_level(logging.ERROR, logger="task_cli.tasks.task_store"):
        assert TaskStore(target).save(sample_tasks) is False
    assert target.is_dir()
    assert any("Could not write" in r.getMessage() for r in caplog.records)


def test_unreadable_path_loads_empty_with_file_diagnostic(tmp_path: Path) -> None:
    outcome = TaskStore(tmp_path).load_outcome()
    assert outcome.tasks == []
    assert [d.scope for d in outcome.diagnostics] == [DiagnosticScope.FILE]


def test_undecodable_bytes_load_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_bytes(b'[{"id": 1, "description": "\xff\xfe"}]')
    outcome = TaskStore(path).load_outcome()
    assert outcome.tasks == []
    assert outcome.diagnostics[0].scope is DiagnosticScope.FILE


def test_diagnostics_are_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{}", "utf-8")
    with caplog.at_level(logging.WARNING, logger="task_cli.tasks.task_store"):
        assert TaskStore(path).load() == []
    messages = [r.getMessage() for r in caplog.records]
    assert any("not a bracketed list" in m for m in messages)
    assert any("empty task list" in m for m in messages)


def test_crlf_file_loads(tmp_path: Path, sample_tasks: list[Task]) -> None:
    path = tmp_path / "tasks.json"
    path.write_bytes(serialize_tasks(sample_tasks).replace("\n", "\r\n").encode("utf-8"))
    assert TaskStore(path).load() == sample_tasks


def test_unencodable_text_keeps_previous_file(
    tmp_path: Path, sample_tasks: list[Task], caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "tasks.json"
    store = TaskStore(path)
    assert store.save(sample_tasks[:1])
    before = path.read_bytes()

    # argv bytes that are not valid UTF-8 arrive as lone surrogates
    bad = replace(sample_tasks[1], description="bad \udcff")
    with caplog.at_level(logging.ERROR, logger="task_cli.tasks.task_store"):
        assert store.save([sample_tasks[0], bad]) is False

    assert path.read_bytes() == before
    assert store.load() == sample_tasks[:1]
    assert any("cannot be stored as UTF-8" in r.getMessage() for r in caplog.records)
