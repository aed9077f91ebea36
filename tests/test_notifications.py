# tests/test_notifications.py

from __future__ import annotations

from taskgrid.notify.notifications import NotificationCenter, Notice, Severity


def test_notice_expires_after_ttl() -> None:
    center = NotificationCenter(ttl_ms=1000)
    center.notify(Notice("Task added successfully!", Severity.SUCCESS), now=10.0)

    assert center.active(now=10.5) == [Notice("Task added successfully!", Severity.SUCCESS)]
    assert center.active(now=11.0)
    assert center.active(now=11.01) == []


def test_only_newest_notices_are_kept() -> None:
    center = NotificationCenter(ttl_ms=60_000, max_items=2)
    for i in range(4):
        center.notify(Notice(f"n{i}"), now=float(i))

    assert [n.message for n in center.active(now=4.0)] == ["n2", "n3"]


def test_default_severity() -> None:
    assert Notice("hello").severity is Severity.DEFAULT
    assert {s.value for s in Severity} == {"success", "error", "info", "default"}
