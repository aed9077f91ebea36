# src/taskgrid/ui/page.py

from __future__ import annotations

from ..tasks.task_models import ModalMode, TaskState, TaskStatus
from ..tasks.task_view import filters_active, status_counts, visible_tasks
from .grid import GridView, render_grid
from .theme import BOLD, DIM, HEADER_COLOR, STATUS_COLOR, color


def render_summary(state: TaskState) -> str:
    counts = status_counts(state)
    parts = [color(f"{s.value}: {counts[s]}", STATUS_COLOR.get(s, "")) for s in TaskStatus]
    return "  ".join(parts)


def render_filters(state: TaskState) -> str:
    if not filters_active(state):
        return color("Filter: none (/filter <text>, /only <status>)", DIM)
    title = state.title_filter or "-"
    status = state.status_filter.value if state.status_filter is not None else "all"
    return color(f'Filter: title="{title}" status={status}', DIM)


def render_modal(state: TaskState) -> list[str]:
    if state.modal is ModalMode.CLOSED:
        return []
    heading = "Add Task" if state.modal is ModalMode.CREATE else f"Edit Task {state.editing_id}"
    choices = " / ".join(s.value for s in TaskStatus)
    return [
        color(f"+-- {heading} " + "-" * 24, HEADER_COLOR, BOLD),
        f"| Title : {state.draft.title or color('<empty>', DIM)}",
        f"| Status: {color(state.draft.status.value, STATUS_COLOR.get(state.draft.status, ''))}  ({choices})",
        "| type a title, /set-status <status>, /save or /cancel",
        color("+" + "-" * 36, HEADER_COLOR),
    ]


def render_page(state: TaskState, grid: GridView, *, title: str = "Tasks", term_width: int | None = None) -> str:
    """The task manager page: status line, counters, filters, grid and the modal when open."""
    lines = [color(title, HEADER_COLOR, BOLD)]

    if state.loading:
        lines.append(color("Loading tasks...", DIM))
    elif state.load_error:
        lines.append(color(f"Could not load tasks: {state.load_error}. Type /reload to retry.", BOLD))

    lines.append(render_summary(state))
    lines.append(render_filters(state))
    lines.append("")

    rows = visible_tasks(state, grid.arrange(state.tasks))
    lines.extend(render_grid(grid.page_of(rows), term_width=term_width))

    modal = render_modal(state)
    if modal:
        lines.append("")
        lines.extend(modal)
    return "\n".join(lines)
