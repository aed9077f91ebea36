# src/taskgrid/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..core.ports import Notifier
from .task_actions import Action
from .task_models import TaskState
from .task_reducer import Transition, reduce

logger = logging.getLogger(__name__)

Listener = Callable[[TaskState], None]


class TaskStore:
    """
    In-memory state container for the task manager.

    All mutations go through `dispatch(action)`, which runs the pure reducer and
    swaps in the returned state. Nothing is persisted: the state dies with the process.

    Thread-safety:
    - the console loop and the background loader both dispatch
    - a re-entrant lock serializes transitions so two updates never interleave
    """

    def __init__(self, notifier: Notifier | None = None, initial: TaskState | None = None) -> None:
        self._state = initial if initial is not None else TaskState()
        self._notifier = notifier
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> TaskState:
        with self._lock:
            return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every transition. Returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, action: Action) -> Transition:
        with self._lock:
            transition = reduce(self._state, action)
            changed = transition.state != self._state
            self._state = transition.state
            listeners = list(self._listeners)

            logger.debug(
                "dispatch %s changed=%s tasks=%d notices=%d",
                type(action).__name__,
                changed,
                len(transition.state.tasks),
                len(transition.notices),
            )

            if self._notifier is not None:
                for notice in transition.notices:
                    self._notifier.notify(notice)

            for listener in listeners:
                try:
                    listener(transition.state)
                except Exception:
                    logger.exception("TaskStore listener failed.")

        return transition
