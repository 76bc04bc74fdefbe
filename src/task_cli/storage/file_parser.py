# src/task_cli/storage/file_parser.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task
from .cursor import WHITESPACE, Cursor
from .diagnostics import Diagnostic, DiagnosticScope
from .object_parser import parse_task_object


@dataclass(slots=True)
class ParseOutcome:
    tasks: list[Task] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    aborted: bool = False


def parse_tasks(text: str) -> ParseOutcome:
    """
    Decode a whole tasks file.

    Never raises for malformed content. Two failure tiers:
    - a malformed object is skipped (record diagnostic) and scanning goes on;
    - bad framing or unbalanced braces yields an empty list (file diagnostic),
      even if some objects were already decoded.
    """
    outcome = ParseOutcome()

    content = text.strip(WHITESPACE)
    if len(content) < 2 or content[0] != "[" or content[-1] != "]":
        if content:
            outcome.diagnostics.append(
                Diagnostic(DiagnosticScope.FILE, "content is not a bracketed list of objects")
            )
        return outcome

    # Scan the array body only; the final ']' never takes part in brace matching.
    cur = Cursor(content[:-1], pos=1)
    index = 0
    while cur.seek("{"):
        index += 1
        start = cur.pos
        end = _match_braces(cur)
        if end is None:
            outcome.diagnostics.append(
                Diagnostic(
                    DiagnosticScope.FILE,
                    f"mismatched braces starting at offset {start}; discarding all tasks",
                )
            )
            outcome.tasks.clear()
            outcome.aborted = True
            return outcome

        result = parse_task_object(content[start : end + 1])
        for note in result.diagnostics:
            outcome.diagnostics.append(Diagnostic(note.scope, f"object #{index}: {note.message}"))

        if result.task is not None:
            outcome.tasks.append(result.task)
        else:
            outcome.diagnostics.append(
                Diagnostic(
                    DiagnosticScope.RECORD,
                    f"object #{index}: skipped ({result.error})",
                )
            )
        cur.pos = end + 1

    return outcome


def _match_braces(cur: Cursor) -> int | None:
    """
    From a '{', walk to its matching '}' and return that index.

    Every brace counts, quoted or not, so a stray quote only spoils its own
    object. Returns None if the input ends first.
    """
    depth = 0
    while True:
        ch = cur.peek()
        if ch == "":
            return None
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return cur.pos
        cur.advance()
