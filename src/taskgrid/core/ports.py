# src/taskgrid/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task manager.

The store and the loader depend on Protocols instead of concrete implementations.
This keeps the todo source and the notification host swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..notify.notifications import Notice
from ..tasks.task_models import RemoteTodo


class TodoSource(Protocol):
    """Where the seed task list comes from (HTTP endpoint, offline fixture, test fake)."""

    async def fetch_todos(self) -> Sequence[RemoteTodo]: ...


class Notifier(Protocol):
    """Notification surface: display a message with a severity for a short while."""

    def notify(self, notice: Notice) -> None: ...
