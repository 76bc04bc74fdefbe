# src/task_cli/storage/serializer.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task
from .escaping import escape_text
from .timestamps import format_timestamp


def _quoted(text: str) -> str:
    return f'"{escape_text(text)}"'


def serialize_task(task: Task) -> str:
    lines = [
        " {",
        f'   "id": {int(task.id)},',
        f'   "description": {_quoted(task.description)},',
        f'   "status": {_quoted(str(task.status))},',
        f'   "createdAt": {_quoted(format_timestamp(task.created_at))},',
        f'   "updatedAt": {_quoted(format_timestamp(task.updated_at))}',
        " }",
    ]
    return "\n".join(lines)


def serialize_tasks(tasks: Iterable[Task]) -> str:
    """Render the whole list: '[', comma-separated objects in list order, ']'."""
    body = ",\n".join(serialize_task(t) for t in tasks)
    if not body:
        return "[\n]\n"
    return f"[\n{body}\n]\n"
