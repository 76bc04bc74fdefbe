# src/task_cli/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..storage.diagnostics import Diagnostic, DiagnosticScope
from ..storage.file_parser import ParseOutcome, parse_tasks
from ..storage.serializer import serialize_tasks
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-like flat-file task store.

    - load() reads the whole file once and never raises
    - save() truncates and rewrites the whole file

    No locking and no temp-file staging: a second process writing the same
    path, or a crash mid-write, can lose data.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- loading ----

    def _read_text(self) -> tuple[str | None, Diagnostic | None]:
        try:
            with open(self._path, encoding="utf-8", newline="") as fh:
                return fh.read(), None
        except FileNotFoundError:
            return None, None
        except (OSError, UnicodeDecodeError) as e:
            return None, Diagnostic(DiagnosticScope.FILE, f"cannot read {self._path}: {e}")

    def load_outcome(self) -> ParseOutcome:
        """Load and return tasks together with every diagnostic (also logged)."""
        text, problem = self._read_text()
        if text is None:
            outcome = ParseOutcome()
            if problem is not None:
                outcome.diagnostics.append(problem)
        else:
            outcome = parse_tasks(text)

        for diag in outcome.diagnostics:
            logger.warning("%s: %s", self._path, diag)

        if outcome.tasks:
            logger.info("Loaded %d task(s) from %s", len(outcome.tasks), self._path)
        elif outcome.aborted or any(d.scope is DiagnosticScope.FILE for d in outcome.diagnostics):
            logger.warning("%s is malformed; starting with an empty task list.", self._path)
        return outcome

    def load(self) -> list[Task]:
        return self.load_outcome().tasks

    # ---- saving ----

    def save(self, tasks: Sequence[Task]) -> bool:
        """
        Overwrite the file with `tasks`.

        Returns False (and logs) if the file cannot be written; the on-disk
        file is left untouched when the text cannot be encoded or the file
        cannot be opened.
        """
        try:
            data = serialize_tasks(tasks).encode("utf-8")
        except UnicodeEncodeError:
            logger.exception("Tasks contain text that cannot be stored as UTF-8; %s not written", self._path)
            return False

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "wb") as fh:
                fh.write(data)
        except OSError:
            logger.exception("Could not write tasks to %s", self._path)
            return False

        logger.info("Saved %d task(s) to %s", len(tasks), self._path)
        return True
