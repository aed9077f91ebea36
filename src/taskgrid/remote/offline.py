# src/taskgrid/remote/offline.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import RemoteTodo


class OfflineTodoSource:
    """
    Offline deterministic todo source used for demos when the network is unavailable.

    Enabled with TASKGRID_OFFLINE=1. Returns the same small list every time.
    """

    SAMPLE: tuple[RemoteTodo, ...] = (
        RemoteTodo(id=1, title="Buy milk", completed=False),
        RemoteTodo(id=2, title="Write weekly report", completed=True),
        RemoteTodo(id=3, title="Call the plumber", completed=False),
        RemoteTodo(id=4, title="Return library books", completed=True),
        RemoteTodo(id=5, title="Plan team offsite", completed=False),
    )

    def __init__(self, todos: Sequence[RemoteTodo] | None = None) -> None:
        self._todos = tuple(self.SAMPLE if todos is None else todos)

    async def fetch_todos(self) -> Sequence[RemoteTodo]:
        return list(self._todos)
