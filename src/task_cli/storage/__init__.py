"""
Tasks file codec.

Components:
- escaping.py: quoted-value escape set
- timestamps.py: `YYYY-MM-DD HH:MM:SS` codec with an epoch fallback
- object_parser.py: one `{...}` object -> Task (or a per-object error)
- file_parser.py: array framing + brace-depth scanning over the whole file
- serializer.py: task list -> file text
"""

from .diagnostics import Diagnostic, DiagnosticScope
from .file_parser import ParseOutcome, parse_tasks
from .serializer import serialize_tasks

__all__ = [
    "Diagnostic",
    "DiagnosticScope",
    "ParseOutcome",
    "parse_tasks",
    "serialize_tasks",
]
