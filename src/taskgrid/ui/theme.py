# src/taskgrid/ui/theme.py

"""Color & style helpers.

- Truecolor when COLORTERM advertises it, otherwise the xterm 256-color cube.
- Disabled when stdout is not a TTY unless FORCE_COLOR=1.
- NO_COLOR disables everything.
"""

from __future__ import annotations

import os
import re
import sys

from ..notify.notifications import Severity
from ..tasks.task_models import TaskStatus

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ""


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""

    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ""
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


RESET = _code("0")
BOLD = _code("1")
DIM = _code("2")

PRIMARY = _from_hex("#476EAE")

STATUS_COLOR: dict[TaskStatus, str] = {
    TaskStatus.TO_DO: _from_hex("#48B3AF"),
    TaskStatus.IN_PROGRESS: _from_hex("#F6FF99"),
    TaskStatus.DONE: _from_hex("#A7E399"),
}

SEVERITY_COLOR: dict[Severity, str] = {
    Severity.SUCCESS: _from_hex("#3FB950"),
    Severity.ERROR: _from_hex("#F85149"),
    Severity.INFO: _from_hex("#58A6FF"),
    Severity.DEFAULT: "",
}

HEADER_COLOR = PRIMARY
ID_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not any(styles):
        return text
    return "".join(styles) + text + RESET


def visible_len(s: str) -> int:
    return len(ANSI_RE.sub("", s))


def pad(s: str, width: int) -> str:
    gap = width - visible_len(s)
    return s + " " * gap if gap > 0 else s
