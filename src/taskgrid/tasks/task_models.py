# src/taskgrid/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are the user-facing labels; the grid and the counters show them as-is.
    """

    TO_DO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        key = " ".join((raw or "").strip().lower().split())
        if not key:
            raise ValueError("Status is empty.")
        for status in cls:
            if status.value.lower() == key:
                return status
        alias = STATUS_ALIASES.get(key)
        if alias is None:
            raise ValueError(f"Unknown status: {raw!r}")
        return alias

    @classmethod
    def from_completed(cls, completed: Any) -> TaskStatus:
        return cls.DONE if completed is True else cls.TO_DO


STATUS_ALIASES: dict[str, TaskStatus] = {
    "t": TaskStatus.TO_DO,
    "todo": TaskStatus.TO_DO,
    "to-do": TaskStatus.TO_DO,
    "ip": TaskStatus.IN_PROGRESS,
    "in-progress": TaskStatus.IN_PROGRESS,
    "doing": TaskStatus.IN_PROGRESS,
    "d": TaskStatus.DONE,
    "done": TaskStatus.DONE,
}


class ModalMode(StrEnum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


@dataclass(slots=True, frozen=True)
class Task:
    id: int
    title: str
    status: TaskStatus = TaskStatus.TO_DO


@dataclass(slots=True, frozen=True)
class RemoteTodo:
    """One item of the remote todo list: {id, title, completed}."""

    id: int
    title: str
    completed: bool

    def to_task(self) -> Task:
        return Task(id=self.id, title=self.title, status=TaskStatus.from_completed(self.completed))


@dataclass(slots=True, frozen=True)
class Draft:
    """Title/status pair edited in the modal before save."""

    title: str = ""
    status: TaskStatus = TaskStatus.TO_DO


@dataclass(slots=True, frozen=True)
class TaskState:
    """
    Everything the task manager owns.

    `next_id` is a monotonic counter: it only grows, so ids freed by deletion
    are never handed out again.
    """

    tasks: tuple[Task, ...] = ()
    title_filter: str = ""
    status_filter: TaskStatus | None = None
    modal: ModalMode = ModalMode.CLOSED
    draft: Draft = field(default_factory=Draft)
    editing_id: int | None = None
    next_id: int = 1
    loading: bool = False
    load_error: str | None = None

    def find(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    @property
    def modal_open(self) -> bool:
        return self.modal is not ModalMode.CLOSED
