# src/task_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..storage.timestamps import format_timestamp
from ..tasks.task_api import (
    TaskNotFoundError,
    add_task,
    delete_task,
    filter_tasks,
    mark_task_status,
    update_task,
)
from ..tasks.task_models import Task, TaskStatus

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """User-facing command failure (bad usage, unknown id, ...)."""


class CommandRegistry:
    """Subcommand registry used by the CLI entrypoint (add, list, mark-done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Run `argv` (command name followed by its arguments).
        Returns the text to print; raises CommandError on failure.
        """
        if not argv:
            raise CommandError("No command given. Use 'help' to list available commands.")

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            raise CommandError(f"Unknown command: {name}. Use 'help' to list available commands.")

        logger.debug("Running command %s (args=%d)", name, len(args))
        try:
            return handler(state, args)
        except TaskNotFoundError as e:
            raise CommandError(str(e)) from e

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int:
    try:
        task_id = int(raw)
    except ValueError:
        raise CommandError(f"Invalid task ID: {raw!r}.") from None
    if task_id < 0:
        raise CommandError(f"Invalid task ID: {raw!r}.")
    return task_id


def _format_task(task: Task) -> str:
    return (
        f"ID: {task.id} | Status: {task.status} | "
        f"Created: {format_timestamp(task.created_at)} | "
        f"Updated: {format_timestamp(task.updated_at)}\n"
        f"Description: {task.description}\n"
        "------------------------"
    )


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """add <description...>"""
    description = " ".join(args).strip()
    if not description:
        raise CommandError("Usage: add <description>")
    task = add_task(state.tasks, description)
    state.mark_dirty()
    return f'Task {task.id} added: "{task.description}"'


def cmd_update(state: AppState, args: list[str]) -> str:
    """update <id> <description...>"""
    if len(args) < 2:
        raise CommandError("Usage: update <id> <description>")
    task_id = _parse_id(args[0])
    description = " ".join(args[1:]).strip()
    if not description:
        raise CommandError("Usage: update <id> <description>")
    update_task(state.tasks, task_id, description)
    state.mark_dirty()
    return f"Task {task_id} updated."


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        raise CommandError("Usage: delete <id>")
    task_id = _parse_id(args[0])
    delete_task(state.tasks, task_id)
    state.mark_dirty()
    return f"Task {task_id} deleted."


def _make_mark(status: TaskStatus) -> CommandHandler:
    def cmd_mark(state: AppState, args: list[str]) -> str:
        if len(args) != 1:
            raise CommandError(f"Usage: mark-{status} <id>")
        task_id = _parse_id(args[0])
        mark_task_status(state.tasks, task_id, status)
        state.mark_dirty()
        return f"Task {task_id} marked as {status}."

    return cmd_mark


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    list          -> all tasks
    list <status> -> only tasks with that status (todo | in-progress | done)
    """
    if len(args) > 1:
        raise CommandError("Usage: list [todo|in-progress|done]")

    status: TaskStatus | None = None
    if args:
        raw = args[0].lower()
        try:
            status = TaskStatus(raw)
        except ValueError:
            choices = ", ".join(s.value for s in TaskStatus)
            raise CommandError(f"Unknown status filter: {raw!r} (expected one of: {choices}).") from None

    shown = filter_tasks(state.tasks, status)
    lines = ["--- Task List ---"]
    lines.extend(_format_task(t) for t in shown)
    if not shown:
        if status is None:
            lines.append("No tasks in the list.")
        else:
            lines.append(f"No tasks found with status: {status}")
    lines.append(f"Total tasks: {len(state.tasks)}")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["-h", "--help"])
registry.register("add", cmd_add, help_text="Add a task: add <description>.")
registry.register("update", cmd_update, help_text="Change a description: update <id> <description>.")
registry.register("delete", cmd_delete, help_text="Delete a task: delete <id>.", aliases=["rm"])
registry.register("mark-todo", _make_mark(TaskStatus.TODO), help_text="Move a task back to todo: mark-todo <id>.")
registry.register(
    "mark-in-progress",
    _make_mark(TaskStatus.IN_PROGRESS),
    help_text="Mark a task as in progress: mark-in-progress <id>.",
)
registry.register("mark-done", _make_mark(TaskStatus.DONE), help_text="Mark a task as done: mark-done <id>.")
registry.register("list", cmd_list, help_text="List tasks: list [todo|in-progress|done].", aliases=["ls"])
