# src/taskgrid/tasks/task_view.py

"""Derived, read-only views over TaskState. Recomputed on every render."""

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task, TaskState, TaskStatus


def matches(task: Task, title_filter: str, status_filter: TaskStatus | None) -> bool:
    if title_filter and title_filter.lower() not in task.title.lower():
        return False
    return status_filter is None or task.status == status_filter


def visible_tasks(state: TaskState, tasks: Iterable[Task] | None = None) -> list[Task]:
    """Tasks passing both filters, in the order given (state order by default)."""
    source = state.tasks if tasks is None else tasks
    return [t for t in source if matches(t, state.title_filter, state.status_filter)]


def status_counts(state: TaskState) -> dict[TaskStatus, int]:
    """Per-status totals over the full, unfiltered list."""
    counts = {status: 0 for status in TaskStatus}
    for task in state.tasks:
        counts[task.status] += 1
    return counts


def filters_active(state: TaskState) -> bool:
    return bool(state.title_filter) or state.status_filter is not None
