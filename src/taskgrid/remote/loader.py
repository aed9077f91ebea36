# src/taskgrid/remote/loader.py

from __future__ import annotations

"""
Task loader.

Fetches the seed list from a TodoSource and feeds the outcome into the TaskStore
as LoadStarted -> LoadSucceeded | LoadFailed.

The console REPL blocks on input(), so the fetch runs on an asyncio loop owned by
a background thread. The UI keeps working (showing an empty list) while a request
is in flight; the result arrives through TaskStore.dispatch like any user action.
"""

import asyncio
import concurrent.futures
import contextlib
import logging
import threading
from dataclasses import dataclass

from ..core.ports import TodoSource
from ..tasks.task_actions import LoadFailed, LoadStarted, LoadSucceeded
from ..tasks.task_store import TaskStore
from .todo_client import TodoFetchError

logger = logging.getLogger(__name__)


async def load_tasks(store: TaskStore, source: TodoSource) -> bool:
    """Run one load. Returns True when the task list was replaced."""
    store.dispatch(LoadStarted())
    try:
        todos = await source.fetch_todos()
    except TodoFetchError as e:
        logger.warning("Task load failed: %s", e)
        store.dispatch(LoadFailed(str(e)))
        return False
    except Exception as e:
        logger.exception("Task load crashed.")
        store.dispatch(LoadFailed(f"{e.__class__.__name__}: {e}"))
        return False

    store.dispatch(LoadSucceeded(tuple(todos)))
    return True


@dataclass(slots=True)
class BackgroundLoader:
    store: TaskStore
    source: TodoSource
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event
    _pending: concurrent.futures.Future | None = None

    def request_load(self) -> concurrent.futures.Future:
        """Schedule a load unless one is already running; returns its future."""
        pending = self._pending
        if pending is not None and not pending.done():
            logger.info("Load already in flight, not starting another.")
            return pending
        fut = asyncio.run_coroutine_threadsafe(load_tasks(self.store, self.source), self.loop)
        self._pending = fut
        return fut

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except Exception:
            logger.debug("Failed to signal loader stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_loader_in_background(store: TaskStore, source: TodoSource) -> BackgroundLoader | None:
    """
    Start the loader thread and its event loop.

    Returns None if the thread did not come up; the caller then shows the page
    without seed data.
    """
    ready = threading.Event()
    holder: dict[str, object] = {}

    async def _serve(stop_event: asyncio.Event) -> None:
        await stop_event.wait()

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_serve(stop_event))
        finally:
            with contextlib.suppress(Exception):
                loop.stop()
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="taskgrid-loader", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Loader thread did not initialize properly.")
        return None

    logger.info("Loader background thread started.")
    return BackgroundLoader(store=store, source=source, thread=t, loop=loop, stop_event=stop_event)
