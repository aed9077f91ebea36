# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskgrid.cli.bootstrap import make_source
from taskgrid.config import DEFAULT_TODOS_URL, Settings
from taskgrid.remote.offline import OfflineTodoSource
from taskgrid.remote.todo_client import HttpTodoSource


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for suffix in (
        "APP_NAME",
        "LOG_LEVEL",
        "DATA_DIR",
        "TODOS_URL",
        "FETCH_CONNECT_TIMEOUT",
        "FETCH_READ_TIMEOUT",
        "OFFLINE",
        "NOTIFY_TTL_MS",
        "PAGE_SIZE",
        "CLEAR_SCREEN",
    ):
        monkeypatch.delenv(f"TASKGRID_{suffix}", raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.todos_url == DEFAULT_TODOS_URL
    assert s.notify_ttl_ms == 1000
    assert s.page_size == 20
    assert s.offline is False
    assert s.data_dir == Path(".local/taskgrid")


def test_env_overrides_and_bad_values(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKGRID_TODOS_URL", "http://localhost:9000/todos")
    clean_env.setenv("TASKGRID_PAGE_SIZE", "0")
    clean_env.setenv("TASKGRID_NOTIFY_TTL_MS", "abc")
    clean_env.setenv("TASKGRID_FETCH_READ_TIMEOUT", "2.5")
    clean_env.setenv("TASKGRID_OFFLINE", "yes")

    s = Settings.from_env()
    assert s.todos_url == "http://localhost:9000/todos"
    assert s.page_size == 20
    assert s.notify_ttl_ms == 1000
    assert s.fetch_read_timeout == 2.5
    assert s.offline is True


def test_make_source_follows_offline_flag(settings) -> None:
    assert isinstance(make_source(settings), HttpTodoSource)
    assert make_source(settings).url == settings.todos_url

    settings.offline = True
    assert isinstance(make_source(settings), OfflineTodoSource)
