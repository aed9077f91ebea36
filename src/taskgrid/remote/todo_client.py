# src/taskgrid/remote/todo_client.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from ..config import DEFAULT_TODOS_URL
from ..tasks.task_models import RemoteTodo

logger = logging.getLogger(__name__)


class TodoFetchError(RuntimeError):
    """The remote todo list could not be read (transport, HTTP status or payload)."""


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)


def parse_todos(payload: Any) -> list[RemoteTodo]:
    """
    Convert the decoded JSON body into RemoteTodo records.

    The body must be a list. Items without an integer id or a string title are
    skipped (logged), as are repeats of an id already seen. The rest keep their
    remote order.
    """
    if not isinstance(payload, list):
        raise TodoFetchError(f"Expected a JSON list, got {type(payload).__name__}.")

    out: list[RemoteTodo] = []
    seen: set[int] = set()
    skipped = 0
    duplicates = 0
    for item in payload:
        if not isinstance(item, dict):
            skipped += 1
            continue
        tid = item.get("id")
        title = item.get("title")
        # bool is an int subclass; reject it as an id.
        if not isinstance(tid, int) or isinstance(tid, bool) or not isinstance(title, str):
            skipped += 1
            continue
        if tid in seen:
            duplicates += 1
            continue
        seen.add(tid)
        out.append(RemoteTodo(id=tid, title=title, completed=item.get("completed") is True))

    if skipped:
        logger.warning("Skipped %d malformed todo item(s).", skipped)
    if duplicates:
        logger.warning("Dropped %d todo item(s) with a repeated id.", duplicates)
    return out


class HttpTodoSource:
    """
    Reads the todo list with a single GET.

    No retries and no auth: a failure is reported once as TodoFetchError and the
    caller decides what to show. The transport is injectable for tests.
    """

    def __init__(
        self,
        url: str = DEFAULT_TODOS_URL,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = _make_timeout(connect_timeout, read_timeout)
        self._transport = transport

    @classmethod
    def from_settings(cls, settings) -> HttpTodoSource:
        return cls(
            str(getattr(settings, "todos_url", DEFAULT_TODOS_URL)),
            connect_timeout=float(getattr(settings, "fetch_connect_timeout", 5.0)),
            read_timeout=float(getattr(settings, "fetch_read_timeout", 15.0)),
        )

    @property
    def url(self) -> str:
        return self._url

    async def fetch_todos(self) -> Sequence[RemoteTodo]:
        logger.info("Fetching todos from %s", self._url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(self._url, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise TodoFetchError(f"HTTP {e.response.status_code} from {self._url}") from e
        except httpx.HTTPError as e:
            raise TodoFetchError(f"{e.__class__.__name__}: {e}") from e
        except ValueError as e:
            raise TodoFetchError("Response is not valid JSON.") from e

        todos = parse_todos(payload)
        logger.info("Fetched %d todos.", len(todos))
        return todos
