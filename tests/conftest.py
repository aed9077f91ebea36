# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskgrid.cli.bootstrap import create_initial_state
from taskgrid.core.state import AppState
from taskgrid.tasks.task_actions import LoadSucceeded
from taskgrid.tasks.task_models import RemoteTodo, TaskState
from taskgrid.tasks.task_reducer import reduce

from .fakes import FakeTodoSource

SAMPLE_TODOS = (
    RemoteTodo(id=1, title="Buy milk", completed=False),
    RemoteTodo(id=2, title="Pay rent", completed=True),
    RemoteTodo(id=3, title="Buy oat MILK", completed=True),
    RemoteTodo(id=4, title="Walk the dog", completed=False),
)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskgrid",
        log_level="WARNING",
        data_dir=tmp_path,
        todos_url="http://todos.test/todos",
        fetch_connect_timeout=1.0,
        fetch_read_timeout=1.0,
        offline=False,
        notify_ttl_ms=1000,
        page_size=20,
        clear_screen=False,
    )


@pytest.fixture()
def loaded_state() -> TaskState:
    """TaskState right after a successful load of SAMPLE_TODOS."""
    return reduce(TaskState(), LoadSucceeded(SAMPLE_TODOS)).state


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with a fake source and seeded with SAMPLE_TODOS (no loader thread)."""
    app = create_initial_state(settings=settings, source=FakeTodoSource(SAMPLE_TODOS))
    app.store.dispatch(LoadSucceeded(SAMPLE_TODOS))
    app.notifications.clear()
    return app
