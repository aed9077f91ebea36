# tests/test_todo_client.py

from __future__ import annotations

import httpx
import pytest

from taskgrid.remote.loader import load_tasks, start_loader_in_background
from taskgrid.remote.offline import OfflineTodoSource
from taskgrid.remote.todo_client import HttpTodoSource, TodoFetchError, parse_todos
from taskgrid.tasks.task_models import TaskStatus
from taskgrid.tasks.task_store import TaskStore
from taskgrid.ui.grid import GridView

from .fakes import FakeTodoSource, RecordingNotifier

URL = "http://todos.test/todos"


def _source(handler) -> HttpTodoSource:
    return HttpTodoSource(URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_parses_remote_list() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json=[
                {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False},
                {"userId": 1, "id": 2, "title": "quis ut nam", "completed": True},
            ],
        )

    todos = await _source(handler).fetch_todos()

    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert str(requests[0].url) == URL
    assert [(t.id, t.completed) for t in todos] == [(1, False), (2, True)]
    assert todos[1].to_task().status is TaskStatus.DONE


@pytest.mark.asyncio
async def test_fetch_http_error_raises_todo_fetch_error() -> None:
    source = _source(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(TodoFetchError, match="503"):
        await source.fetch_todos()


@pytest.mark.asyncio
async def test_fetch_transport_error_raises_todo_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    with pytest.raises(TodoFetchError):
        await _source(handler).fetch_todos()


@pytest.mark.asyncio
async def test_fetch_invalid_json_raises_todo_fetch_error() -> None:
    source = _source(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(TodoFetchError):
        await source.fetch_todos()


def test_parse_skips_malformed_items() -> None:
    todos = parse_todos(
        [
            {"id": 1, "title": "ok", "completed": True},
            {"id": "2", "title": "string id"},
            {"id": 3},
            {"id": True, "title": "bool id"},
            "junk",
            {"id": 4, "title": "no completed flag"},
        ]
    )
    assert [(t.id, t.completed) for t in todos] == [(1, True), (4, False)]


def test_parse_drops_repeated_ids_keeping_the_first() -> None:
    todos = parse_todos(
        [
            {"id": 1, "title": "first", "completed": False},
            {"id": 2, "title": "second"},
            {"id": 1, "title": "repeat", "completed": True},
        ]
    )
    assert [(t.id, t.title) for t in todos] == [(1, "first"), (2, "second")]

    # Unique ids keep every row visible after a manual reorder.
    grid = GridView()
    tasks = [t.to_task() for t in todos]
    assert grid.move_row(tasks, 2, 1)
    assert [t.title for t in grid.arrange(tasks)] == ["second", "first"]


def test_parse_rejects_non_list() -> None:
    with pytest.raises(TodoFetchError):
        parse_todos({"items": []})


@pytest.mark.asyncio
async def test_load_tasks_success_replaces_list() -> None:
    notifier = RecordingNotifier()
    store = TaskStore(notifier=notifier)

    ok = await load_tasks(store, OfflineTodoSource())

    assert ok is True
    assert len(store.state.tasks) == len(OfflineTodoSource.SAMPLE)
    assert store.state.loading is False
    assert notifier.notices[-1].message == f"Loaded {len(OfflineTodoSource.SAMPLE)} tasks."


@pytest.mark.asyncio
async def test_load_tasks_failure_is_surfaced_then_retry_succeeds() -> None:
    notifier = RecordingNotifier()
    store = TaskStore(notifier=notifier)
    source = FakeTodoSource(error=TodoFetchError("HTTP 500 from x"))

    ok = await load_tasks(store, source)
    assert ok is False
    assert store.state.tasks == ()
    assert store.state.load_error == "HTTP 500 from x"
    assert notifier.notices[-1].severity == "error"

    source.error = None
    source.todos = list(OfflineTodoSource.SAMPLE[:2])
    assert await load_tasks(store, source) is True
    assert len(store.state.tasks) == 2
    assert store.state.load_error is None
    assert source.calls == 2


@pytest.mark.asyncio
async def test_load_tasks_unexpected_error_becomes_load_failed() -> None:
    store = TaskStore()
    ok = await load_tasks(store, FakeTodoSource(error=KeyError("id")))
    assert ok is False
    assert store.state.load_error is not None
    assert "KeyError" in store.state.load_error


def test_background_loader_runs_fetch_off_the_main_thread() -> None:
    store = TaskStore()
    source = FakeTodoSource(OfflineTodoSource.SAMPLE)
    loader = start_loader_in_background(store, source)
    assert loader is not None
    try:
        assert loader.request_load().result(timeout=5.0) is True
        assert len(store.state.tasks) == len(OfflineTodoSource.SAMPLE)
    finally:
        loader.stop()
        loader.join(timeout=5.0)
    assert not loader.thread.is_alive()
