# src/taskgrid/tasks/task_actions.py

"""Actions accepted by the task reducer. One frozen dataclass per user or loader event."""

from __future__ import annotations

from dataclasses import dataclass

from .task_models import RemoteTodo, TaskStatus


@dataclass(slots=True, frozen=True)
class LoadStarted:
    pass


@dataclass(slots=True, frozen=True)
class LoadSucceeded:
    todos: tuple[RemoteTodo, ...]


@dataclass(slots=True, frozen=True)
class LoadFailed:
    reason: str


@dataclass(slots=True, frozen=True)
class OpenCreate:
    pass


@dataclass(slots=True, frozen=True)
class OpenEdit:
    task_id: int


@dataclass(slots=True, frozen=True)
class DraftChanged:
    title: str | None = None
    status: TaskStatus | None = None


@dataclass(slots=True, frozen=True)
class SaveDraft:
    pass


@dataclass(slots=True, frozen=True)
class CancelModal:
    pass


@dataclass(slots=True, frozen=True)
class DeleteTask:
    task_id: int


@dataclass(slots=True, frozen=True)
class InlineStatusEdit:
    task_id: int
    status: TaskStatus


@dataclass(slots=True, frozen=True)
class InlineTitleEdit:
    task_id: int
    title: str


@dataclass(slots=True, frozen=True)
class SetTitleFilter:
    text: str


@dataclass(slots=True, frozen=True)
class SetStatusFilter:
    status: TaskStatus | None


@dataclass(slots=True, frozen=True)
class ClearFilters:
    pass


Action = (
    LoadStarted
    | LoadSucceeded
    | LoadFailed
    | OpenCreate
    | OpenEdit
    | DraftChanged
    | SaveDraft
    | CancelModal
    | DeleteTask
    | InlineStatusEdit
    | InlineTitleEdit
    | SetTitleFilter
    | SetStatusFilter
    | ClearFilters
)
