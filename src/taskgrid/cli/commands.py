# src/taskgrid/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_actions import (
    CancelModal,
    ClearFilters,
    DeleteTask,
    DraftChanged,
    OpenCreate,
    OpenEdit,
    SaveDraft,
    SetStatusFilter,
    SetTitleFilter,
)
from ..tasks.task_models import TaskStatus
from ..ui.grid import RowAction, cell_edit_to_action, row_action_to_action

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str | None]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str | None]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

STATUS_HELP = "to do|in progress|done (or t/ip/d)"


class CommandRegistry:
    """Simple slash-command registry used by the console loop (/help, /add, ...)."""

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

    def handle(self, state: AppState, line: str, emit: CommandEmitter | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, "" for a handled command with nothing to say,
        or None if the line is not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            reply = h3(state, args, emit)
        else:
            h2 = cast(CommandHandler2, handler)
            reply = h2(state, args)
        return "" if reply is None else reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (changes are not saved).")
        return "\n".join(lines)


registry = CommandRegistry()


# -------------------- argument helpers --------------------

def _parse_id(raw: str) -> int | None:
    raw = raw.strip().rstrip(".")
    # isdigit() also accepts superscripts, which int() rejects.
    return int(raw) if raw.isdecimal() else None


def _parse_status(raw: str) -> TaskStatus | None:
    try:
        return TaskStatus.parse(raw)
    except ValueError:
        return None


def _require_task(state: AppState, raw: str) -> tuple[int | None, str | None]:
    """Return (task_id, None) for an existing task, else (None, error message)."""
    tid = _parse_id(raw)
    if tid is None:
        return None, "Invalid id."
    if state.store.state.find(tid) is None:
        return None, f"Task {tid} not found."
    return tid, None


# -------------------- general --------------------

def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_reload(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    loader = state.loader
    if loader is None:
        return "Loader is not running; restart the app to fetch tasks."
    current = state.store.state
    if current.loading:
        return "Tasks are already loading."
    # A load replaces the list wholesale, local edits included.
    if current.load_error is None and current.tasks:
        return "Tasks already loaded."
    if emit:
        with contextlib.suppress(Exception):
            emit("Reloading tasks in the background...")
    logger.info("Manual reload requested.")
    loader.request_load()
    return "Reload started. Press Enter to refresh the page."


# -------------------- modal form --------------------

def cmd_add(state: AppState, args: list[str]) -> str | None:
    """
    /add           -> open the Add Task form
    /add <title>   -> add a "To Do" task right away
    """
    if state.store.state.modal_open:
        return "A form is already open. Use /save or /cancel first."
    state.store.dispatch(OpenCreate())
    if args:
        state.store.dispatch(DraftChanged(title=" ".join(args)))
        state.store.dispatch(SaveDraft())
    return None


def cmd_edit(state: AppState, args: list[str]) -> str | None:
    if len(args) != 1:
        return "Usage: /edit <id>"
    if state.store.state.modal_open:
        return "A form is already open. Use /save or /cancel first."
    tid, err = _require_task(state, args[0])
    if err:
        return err
    state.store.dispatch(OpenEdit(task_id=cast(int, tid)))
    return None


def cmd_title(state: AppState, args: list[str]) -> str | None:
    if not state.store.state.modal_open:
        return "No form is open. Use /add or /edit <id>."
    state.store.dispatch(DraftChanged(title=" ".join(args)))
    return None


def cmd_set_status(state: AppState, args: list[str]) -> str | None:
    if not state.store.state.modal_open:
        return "No form is open. Use /add or /edit <id>."
    status = _parse_status(" ".join(args))
    if status is None:
        return f"Usage: /set-status <{STATUS_HELP}>"
    state.store.dispatch(DraftChanged(status=status))
    return None


def cmd_save(state: AppState, args: list[str]) -> str | None:
    if not state.store.state.modal_open:
        return "No form is open."
    state.store.dispatch(SaveDraft())
    return None


def cmd_cancel(state: AppState, args: list[str]) -> str | None:
    if not state.store.state.modal_open:
        return "No form is open."
    state.store.dispatch(CancelModal())
    return None


# -------------------- row operations --------------------

def cmd_rm(state: AppState, args: list[str]) -> str | None:
    if len(args) != 1:
        return "Usage: /rm <id>"
    tid = _parse_id(args[0])
    if tid is None:
        return "Invalid id."
    # Unknown ids are a no-op in the store; say so here.
    if state.store.state.find(tid) is None:
        return f"Task {tid} not found."
    state.store.dispatch(DeleteTask(task_id=tid))
    return None


def cmd_click(state: AppState, args: list[str]) -> str | None:
    """/click <id> edit|delete -> press a row's action button."""
    if len(args) != 2:
        return "Usage: /click <id> edit|delete"
    tid, err = _require_task(state, args[0])
    if err:
        return err
    try:
        action = RowAction(args[1].lower())
    except ValueError:
        return "Usage: /click <id> edit|delete"
    if action is RowAction.EDIT and state.store.state.modal_open:
        return "A form is already open. Use /save or /cancel first."
    state.store.dispatch(row_action_to_action(action, cast(int, tid)))
    return None


def cmd_cell(state: AppState, args: list[str]) -> str | None:
    """/cell <id> <column> <value> -> inline edit of a grid cell."""
    if len(args) < 3:
        return f"Usage: /cell <id> title <text> | /cell <id> status <{STATUS_HELP}>"
    tid, err = _require_task(state, args[0])
    if err:
        return err
    task = state.store.state.find(cast(int, tid))
    if task is None:
        return f"Task {tid} not found."
    try:
        action = cell_edit_to_action(task, args[1].lower(), " ".join(args[2:]))
    except ValueError as e:
        return str(e)
    state.store.dispatch(action)
    return None


def cmd_status(state: AppState, args: list[str]) -> str | None:
    """/status <id> <status> -> shorthand for /cell <id> status <status>."""
    if len(args) < 2:
        return f"Usage: /status <id> <{STATUS_HELP}>"
    return cmd_cell(state, [args[0], "status", *args[1:]])


def cmd_move(state: AppState, args: list[str]) -> str | None:
    if len(args) != 2:
        return "Usage: /move <id> <position>"
    tid = _parse_id(args[0])
    pos = _parse_id(args[1])
    if tid is None or pos is None:
        return "Usage: /move <id> <position>"
    if not state.grid.move_row(state.store.state.tasks, tid, pos):
        return f"Task {tid} not found."
    return None


# -------------------- filters & paging --------------------

def cmd_filter(state: AppState, args: list[str]) -> str | None:
    state.store.dispatch(SetTitleFilter(text=" ".join(args)))
    state.grid.set_page(1)
    return None


def cmd_only(state: AppState, args: list[str]) -> str | None:
    raw = " ".join(args).strip()
    if not raw or raw.lower() in ("all", "none", "any"):
        state.store.dispatch(SetStatusFilter(status=None))
        state.grid.set_page(1)
        return None
    status = _parse_status(raw)
    if status is None:
        return f"Usage: /only <{STATUS_HELP}|all>"
    state.store.dispatch(SetStatusFilter(status=status))
    state.grid.set_page(1)
    return None


def cmd_clear(state: AppState, args: list[str]) -> str | None:
    state.store.dispatch(ClearFilters())
    state.grid.set_page(1)
    return None


def cmd_page(state: AppState, args: list[str]) -> str | None:
    if len(args) != 1 or _parse_id(args[0]) is None:
        return "Usage: /page <n>"
    state.grid.set_page(cast(int, _parse_id(args[0])))
    return None


def cmd_next(state: AppState, args: list[str]) -> str | None:
    state.grid.next_page()
    return None


def cmd_prev(state: AppState, args: list[str]) -> str | None:
    state.grid.prev_page()
    return None


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Open the Add Task form (/add <title> adds directly).")
registry.register("edit", cmd_edit, help_text="Open the edit form for a task: /edit <id>.")
registry.register("title", cmd_title, help_text="Set the form title: /title <text>.")
registry.register("set-status", cmd_set_status, help_text=f"Set the form status: /set-status <{STATUS_HELP}>.")
registry.register("save", cmd_save, help_text="Save the open form.")
registry.register("cancel", cmd_cancel, help_text="Close the open form without changes.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete"])
registry.register("click", cmd_click, help_text="Press a row button: /click <id> edit|delete.")
registry.register("cell", cmd_cell, help_text="Inline edit: /cell <id> title|status <value>.")
registry.register("status", cmd_status, help_text="Inline status edit: /status <id> <status>.")
registry.register("move", cmd_move, help_text="Move a row on screen: /move <id> <position>.")
registry.register("filter", cmd_filter, help_text="Filter by title text: /filter <text> (empty clears).")
registry.register("only", cmd_only, help_text="Filter by status: /only <status|all>.")
registry.register("clear", cmd_clear, help_text="Clear both filters.")
registry.register("page", cmd_page, help_text="Go to page: /page <n>.")
registry.register("next", cmd_next, help_text="Next page.")
registry.register("prev", cmd_prev, help_text="Previous page.")
registry.register("reload", cmd_reload, help_text="Retry the task load after it failed.")
