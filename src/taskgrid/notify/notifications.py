# src/taskgrid/notify/notifications.py

"""
Transient, severity-tagged notices shown at the top of the page.

There are no timers: a notice carries its creation time and `active(now)`
drops the ones older than the TTL whenever the page is rendered.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)


class Severity(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    DEFAULT = "default"


@dataclass(slots=True, frozen=True)
class Notice:
    message: str
    severity: Severity = Severity.DEFAULT


@dataclass(slots=True, frozen=True)
class ShownNotice:
    notice: Notice
    created_at: float
    expires_at: float


class NotificationCenter:
    """Notification host. Implements the Notifier port."""

    def __init__(self, ttl_ms: int = 1000, *, max_items: int = 5) -> None:
        self._ttl_s = max(0, int(ttl_ms)) / 1000.0
        self._max_items = max(1, int(max_items))
        self._items: list[ShownNotice] = []
        self._lock = threading.Lock()

    def notify(self, notice: Notice, *, now: float | None = None) -> None:
        ts = time.monotonic() if now is None else now
        shown = ShownNotice(notice=notice, created_at=ts, expires_at=ts + self._ttl_s)
        with self._lock:
            self._items.append(shown)
            # Oldest first; only the newest few are kept.
            del self._items[: -self._max_items]
        logger.debug("Notice [%s] %s", notice.severity, notice.message)

    def active(self, now: float | None = None) -> list[Notice]:
        ts = time.monotonic() if now is None else now
        with self._lock:
            self._items = [s for s in self._items if s.expires_at >= ts]
            return [s.notice for s in self._items]

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
