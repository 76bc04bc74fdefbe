# src/task_cli/storage/diagnostics.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DiagnosticScope(StrEnum):
    """
    How much of the file a problem costs:
    - field: one value was defaulted or ignored, the record is kept
    - record: one object was skipped, the load continues
    - file: nothing was loaded
    """

    FIELD = "field"
    RECORD = "record"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    scope: DiagnosticScope
    message: str

    def __str__(self) -> str:
        return f"[{self.scope}] {self.message}"
