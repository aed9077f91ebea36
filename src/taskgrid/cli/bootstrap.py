# src/taskgrid/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data dir exists,
- wires the todo source, notification host, store and view into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TodoSource
from ..core.state import AppState
from ..notify.notifications import NotificationCenter
from ..remote.loader import start_loader_in_background
from ..remote.offline import OfflineTodoSource
from ..remote.todo_client import HttpTodoSource
from ..tasks.task_store import TaskStore
from ..ui.grid import GridView
from ..ui.shell import RootShell, TaskManagerView

logger = logging.getLogger(__name__)


def make_source(settings) -> TodoSource:
    if getattr(settings, "offline", False):
        logger.info("Offline mode: using built-in sample todos.")
        return OfflineTodoSource()
    return HttpTodoSource.from_settings(settings)


def create_initial_state(*, settings=None, source: TodoSource | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the source injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    notifications = NotificationCenter(ttl_ms=int(getattr(settings, "notify_ttl_ms", 1000)))
    store = TaskStore(notifier=notifications)
    grid = GridView(page_size=int(getattr(settings, "page_size", 20)))
    manager = TaskManagerView(store, grid, title=str(getattr(settings, "app_name", "taskgrid")))

    return AppState(
        settings=settings,
        store=store,
        notifications=notifications,
        grid=grid,
        shell=RootShell(notifications, manager),
        source=source if source is not None else make_source(settings),
    )


def start_initial_load(state: AppState) -> None:
    """Start the loader thread and kick off the one-time fetch."""
    loader = start_loader_in_background(state.store, state.source)
    state.loader = loader
    if loader is None:
        logger.error("Initial load skipped: loader thread unavailable.")
        return
    loader.request_load()
