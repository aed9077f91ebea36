# src/taskgrid/ui/shell.py

from __future__ import annotations

from ..notify.notifications import NotificationCenter, Notice, Severity
from ..tasks.task_store import TaskStore
from .grid import GridView
from .page import render_page
from .theme import SEVERITY_COLOR, color


def render_notice(notice: Notice) -> str:
    tag = "" if notice.severity is Severity.DEFAULT else f"[{notice.severity.value.upper()}] "
    return color(f"{tag}{notice.message}", SEVERITY_COLOR.get(notice.severity, ""))


class TaskManagerView:
    """The single task manager mounted by the shell: store + presentation state."""

    def __init__(self, store: TaskStore, grid: GridView, *, title: str = "Tasks") -> None:
        self.store = store
        self.grid = grid
        self.title = title

    def render(self, term_width: int | None = None) -> str:
        return render_page(self.store.state, self.grid, title=self.title, term_width=term_width)


class RootShell:
    """Notification host on top, exactly one task manager below. No state of its own."""

    def __init__(self, notifications: NotificationCenter, manager: TaskManagerView) -> None:
        self.notifications = notifications
        self.manager = manager

    def render(self, now: float | None = None, term_width: int | None = None) -> str:
        notices = self.notifications.active(now)
        parts = [render_notice(n) for n in notices]
        if parts:
            parts.append("")
        parts.append(self.manager.render(term_width=term_width))
        return "\n".join(parts)
