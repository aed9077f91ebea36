# src/taskgrid/tasks/task_reducer.py

from __future__ import annotations

"""
Task reducer.

`reduce(state, action)` is pure: it returns the next TaskState plus the notices
the action produced. It never performs I/O and never mutates its input, so the
whole task manager can be tested without a terminal or a network.

Notices follow the original UI wording:
- add/update save -> success
- delete -> error-styled
- inline edits -> info
- load -> default / error
"""

import logging
from dataclasses import dataclass, replace

from ..notify.notifications import Notice, Severity
from .task_actions import (
    Action,
    CancelModal,
    ClearFilters,
    DeleteTask,
    DraftChanged,
    InlineStatusEdit,
    InlineTitleEdit,
    LoadFailed,
    LoadStarted,
    LoadSucceeded,
    OpenCreate,
    OpenEdit,
    SaveDraft,
    SetStatusFilter,
    SetTitleFilter,
)
from .task_models import Draft, ModalMode, Task, TaskState

logger = logging.getLogger(__name__)

EMPTY_TITLE_MESSAGE = "Task title cannot be empty."


@dataclass(slots=True, frozen=True)
class Transition:
    state: TaskState
    notices: tuple[Notice, ...] = ()


def _unchanged(state: TaskState, *notices: Notice) -> Transition:
    return Transition(state=state, notices=notices)


def _replace_task(tasks: tuple[Task, ...], updated: Task) -> tuple[Task, ...]:
    return tuple(updated if t.id == updated.id else t for t in tasks)


def _close_modal(state: TaskState, **changes) -> TaskState:
    return replace(state, modal=ModalMode.CLOSED, draft=Draft(), editing_id=None, **changes)


# ---- loading ----

def _load_started(state: TaskState, action: LoadStarted) -> Transition:
    return _unchanged(replace(state, loading=True, load_error=None))


def _load_succeeded(state: TaskState, action: LoadSucceeded) -> Transition:
    tasks = tuple(todo.to_task() for todo in action.todos)
    next_id = state.next_id
    if tasks:
        next_id = max(next_id, max(t.id for t in tasks) + 1)
    new_state = replace(state, tasks=tasks, next_id=next_id, loading=False, load_error=None)
    return _unchanged(new_state, Notice(f"Loaded {len(tasks)} tasks.", Severity.DEFAULT))


def _load_failed(state: TaskState, action: LoadFailed) -> Transition:
    new_state = replace(state, loading=False, load_error=action.reason)
    return _unchanged(
        new_state,
        Notice(f"Failed to load tasks: {action.reason} (use /reload to retry)", Severity.ERROR),
    )


# ---- modal ----

# Add/Edit only open from Closed; an open form must be saved or cancelled first.

def _open_create(state: TaskState, action: OpenCreate) -> Transition:
    if state.modal_open:
        return _unchanged(state)
    return _unchanged(replace(state, modal=ModalMode.CREATE, draft=Draft(), editing_id=None))


def _open_edit(state: TaskState, action: OpenEdit) -> Transition:
    if state.modal_open:
        return _unchanged(state)
    task = state.find(action.task_id)
    if task is None:
        logger.debug("OpenEdit ignored: task id=%s not found", action.task_id)
        return _unchanged(state)
    draft = Draft(title=task.title, status=task.status)
    return _unchanged(replace(state, modal=ModalMode.EDIT, draft=draft, editing_id=task.id))


def _draft_changed(state: TaskState, action: DraftChanged) -> Transition:
    if not state.modal_open:
        return _unchanged(state)
    draft = state.draft
    if action.title is not None:
        draft = replace(draft, title=action.title)
    if action.status is not None:
        draft = replace(draft, status=action.status)
    return _unchanged(replace(state, draft=draft))


def _save_draft(state: TaskState, action: SaveDraft) -> Transition:
    if not state.modal_open:
        return _unchanged(state)

    title = state.draft.title.strip()
    if not title:
        return _unchanged(state, Notice(EMPTY_TITLE_MESSAGE, Severity.ERROR))

    if state.modal is ModalMode.EDIT:
        current = state.find(state.editing_id) if state.editing_id is not None else None
        if current is None:
            return _unchanged(
                _close_modal(state),
                Notice(f"Task {state.editing_id} no longer exists.", Severity.ERROR),
            )
        updated = replace(current, title=title, status=state.draft.status)
        new_state = _close_modal(state, tasks=_replace_task(state.tasks, updated))
        return _unchanged(new_state, Notice("Task updated successfully!", Severity.SUCCESS))

    task = Task(id=state.next_id, title=title, status=state.draft.status)
    new_state = _close_modal(state, tasks=(task, *state.tasks), next_id=state.next_id + 1)
    return _unchanged(new_state, Notice("Task added successfully!", Severity.SUCCESS))


def _cancel_modal(state: TaskState, action: CancelModal) -> Transition:
    if not state.modal_open:
        return _unchanged(state)
    return _unchanged(_close_modal(state))


# ---- row operations ----

def _delete_task(state: TaskState, action: DeleteTask) -> Transition:
    remaining = tuple(t for t in state.tasks if t.id != action.task_id)
    if len(remaining) == len(state.tasks):
        logger.debug("DeleteTask ignored: task id=%s not found", action.task_id)
        return _unchanged(state)
    return _unchanged(replace(state, tasks=remaining), Notice("Task deleted.", Severity.ERROR))


def _inline_status_edit(state: TaskState, action: InlineStatusEdit) -> Transition:
    task = state.find(action.task_id)
    if task is None or task.status == action.status:
        return _unchanged(state)
    updated = replace(task, status=action.status)
    return _unchanged(
        replace(state, tasks=_replace_task(state.tasks, updated)),
        Notice(f'Task updated to "{action.status}".', Severity.INFO),
    )


def _inline_title_edit(state: TaskState, action: InlineTitleEdit) -> Transition:
    task = state.find(action.task_id)
    if task is None:
        return _unchanged(state)
    title = action.title.strip()
    if not title:
        return _unchanged(state, Notice(EMPTY_TITLE_MESSAGE, Severity.ERROR))
    if title == task.title:
        return _unchanged(state)
    updated = replace(task, title=title)
    return _unchanged(
        replace(state, tasks=_replace_task(state.tasks, updated)),
        Notice("Task title updated.", Severity.INFO),
    )


# ---- filters ----

def _set_title_filter(state: TaskState, action: SetTitleFilter) -> Transition:
    return _unchanged(replace(state, title_filter=action.text))


def _set_status_filter(state: TaskState, action: SetStatusFilter) -> Transition:
    return _unchanged(replace(state, status_filter=action.status))


def _clear_filters(state: TaskState, action: ClearFilters) -> Transition:
    return _unchanged(replace(state, title_filter="", status_filter=None))


_HANDLERS = {
    LoadStarted: _load_started,
    LoadSucceeded: _load_succeeded,
    LoadFailed: _load_failed,
    OpenCreate: _open_create,
    OpenEdit: _open_edit,
    DraftChanged: _draft_changed,
    SaveDraft: _save_draft,
    CancelModal: _cancel_modal,
    DeleteTask: _delete_task,
    InlineStatusEdit: _inline_status_edit,
    InlineTitleEdit: _inline_title_edit,
    SetTitleFilter: _set_title_filter,
    SetStatusFilter: _set_status_filter,
    ClearFilters: _clear_filters,
}


def reduce(state: TaskState, action: Action) -> Transition:
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unsupported action: {action!r}")
    return handler(state, action)
