# src/taskgrid/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..notify.notifications import NotificationCenter
from ..remote.loader import BackgroundLoader
from ..tasks.task_store import TaskStore
from ..ui.grid import GridView
from ..ui.shell import RootShell
from .ports import TodoSource


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace with the same attributes).
    settings: Any

    store: TaskStore
    notifications: NotificationCenter
    grid: GridView
    shell: RootShell
    source: TodoSource

    # Set once the background loader thread is up; None in tests and when startup failed.
    loader: BackgroundLoader | None = None
