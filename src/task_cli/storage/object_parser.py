# src/task_cli/storage/object_parser.py

"""
Decoder for one `{...}` task object.

Accepted grammar (a deliberately small subset of JSON):

    object := "{" [ pair { "," pair } ] "}"
    pair   := quoted ":" ( quoted | digits )

Failures are scoped to the object: the result carries an error message instead
of a task, and the file parser decides what to do with it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task, TaskStatus
from .cursor import Cursor
from .diagnostics import Diagnostic, DiagnosticScope
from .escaping import unescape_text
from .timestamps import EPOCH, parse_timestamp

KNOWN_KEYS = ("id", "description", "status", "createdAt", "updatedAt")


class _MalformedObject(ValueError):
    pass


@dataclass(slots=True)
class ObjectResult:
    task: Task | None
    error: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.task is not None


def parse_task_object(text: str) -> ObjectResult:
    notes: list[Diagnostic] = []
    try:
        task = _parse_object(Cursor(text), notes)
    except _MalformedObject as e:
        return ObjectResult(task=None, error=str(e), diagnostics=notes)
    return ObjectResult(task=task, diagnostics=notes)


def _read_quoted(cur: Cursor, what: str) -> str:
    raw = cur.read_quoted_raw()
    if raw is None:
        raise _MalformedObject(f"unterminated string in {what}")
    try:
        return unescape_text(raw)
    except ValueError as e:
        raise _MalformedObject(f"bad escape in {what}: {e}") from e


def _read_key(cur: Cursor) -> str:
    ch = cur.peek()
    if ch != '"':
        found = "end of input" if ch == "" else repr(ch)
        raise _MalformedObject(f"expected quoted key, found {found}")
    return _read_quoted(cur, "key")


def _read_value(cur: Cursor, key: str) -> str | int:
    ch = cur.peek()
    if ch == '"':
        return _read_quoted(cur, f"value for key {key!r}")
    digits = cur.read_digits()
    if digits:
        return int(digits)
    found = "end of input" if ch == "" else repr(ch)
    raise _MalformedObject(f"expected quoted string or integer for key {key!r}, found {found}")


def _parse_object(cur: Cursor, notes: list[Diagnostic]) -> Task:
    task = Task(
        id=0,
        description="",
        status=TaskStatus.TODO,
        created_at=EPOCH,
        updated_at=EPOCH,
    )

    cur.skip_whitespace()
    if cur.peek() != "{":
        raise _MalformedObject("expected '{' at start of object")
    cur.advance()
    cur.skip_whitespace()

    if cur.peek() == "}":
        cur.advance()
    else:
        while True:
            key = _read_key(cur)

            cur.skip_whitespace()
            if cur.peek() != ":":
                raise _MalformedObject(f"expected ':' after key {key!r}")
            cur.advance()
            cur.skip_whitespace()

            value = _read_value(cur, key)
            _assign(task, key, value, notes)

            cur.skip_whitespace()
            ch = cur.peek()
            if ch == ",":
                cur.advance()
                cur.skip_whitespace()
                continue
            if ch == "}":
                cur.advance()
                break
            if ch == "":
                raise _MalformedObject(f"unexpected end of input after value for key {key!r}")
            raise _MalformedObject(f"expected ',' or '}}' after value for key {key!r}, found {ch!r}")

    cur.skip_whitespace()
    if not cur.at_end():
        raise _MalformedObject("unexpected text after closing '}'")
    return task


def _assign(task: Task, key: str, value: str | int, notes: list[Diagnostic]) -> None:
    if key not in KNOWN_KEYS:
        notes.append(Diagnostic(DiagnosticScope.FIELD, f"unknown key {key!r} ignored"))
        return

    if key == "id":
        if not isinstance(value, int):
            raise _MalformedObject(f"'id' must be a bare integer, got {value!r}")
        task.id = value
        return

    if isinstance(value, int):
        raise _MalformedObject(f"{key!r} must be a quoted string, got {value}")

    if key == "description":
        task.description = value
    elif key == "status":
        task.status = TaskStatus.from_storage(value)
        if task.status != value:
            notes.append(
                Diagnostic(DiagnosticScope.FIELD, f"unknown status {value!r}, using {task.status}")
            )
    else:
        ts, problem = parse_timestamp(value)
        if problem:
            notes.append(Diagnostic(DiagnosticScope.FIELD, f"{key}: {problem}; using epoch"))
        if key == "createdAt":
            task.created_at = ts
        else:
            task.updated_at = ts
