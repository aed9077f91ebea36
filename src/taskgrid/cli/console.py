# src/taskgrid/cli/console.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from ..core.state import AppState
from ..tasks.task_actions import DraftChanged
from ..tasks.task_models import TaskState
from .commands import registry as command_registry

logger = logging.getLogger(__name__)

PROMPT = "\n: "


def _clear_screen() -> None:
    # ESC[3J scrollback, ESC[H home, ESC[2J screen, ESC[H home.
    if sys.stdout.isatty():
        print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def load_finished_listener(
    out: TextIO | None = None, *, loading: bool = False
) -> Callable[[TaskState], None]:
    """
    Store listener that prints a one-line hint when a load finishes.

    The loader thread completes while the prompt is blocked on input(), so the
    page cannot redraw itself; the hint tells the user to press Enter.
    """
    was_loading = loading

    def _on_transition(s: TaskState) -> None:
        nonlocal was_loading
        finished = was_loading and not s.loading
        was_loading = s.loading
        if not finished:
            return
        stream = out if out is not None else sys.stdout
        outcome = "Task load failed" if s.load_error else "Tasks loaded"
        print(f"\n[{outcome}. Press Enter to refresh.]", file=stream, flush=True)

    return _on_transition


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one line of user input. Returns the text to show under the page.

    - slash commands go to the registry
    - plain text while the form is open becomes the draft title
    - anything else gets a hint
    """
    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply or None

    if state.store.state.modal_open:
        state.store.dispatch(DraftChanged(title=line))
        return None

    return "Unknown input. Type /help for commands."


def run_console_loop(state: AppState) -> None:
    """Redraw the page, read a line, act on it; repeat until /exit or EOF."""
    logger.info("Console started.")
    message: str | None = "Type /help for commands. Press Enter to refresh."
    unsubscribe = state.store.subscribe(load_finished_listener(loading=state.store.state.loading))
    try:
        _loop(state, message)
    finally:
        unsubscribe()
    logger.info("Console finished.")


def _loop(state: AppState, message: str | None) -> None:
    clear = bool(getattr(state.settings, "clear_screen", True))

    while True:
        if clear:
            _clear_screen()
        print(state.shell.render())
        if message:
            print(f"\n{message}")
        message = None

        try:
            line = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            message = handle_line(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            message = "Internal error while handling a command."

