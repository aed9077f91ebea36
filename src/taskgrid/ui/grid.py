# src/taskgrid/ui/grid.py

"""Editable task grid: column definitions, presentation state and text rendering.

Columns render through typed callbacks that return structured cells. The
Actions column yields ActionButtons carrying an explicit RowAction, and a click
is dispatched on that identifier (never on the button label).

GridView holds presentation-only state (page, row order). None of it flows back
into TaskState: moving a row or changing page never touches the task list.
"""

from __future__ import annotations

import math
import shutil
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_actions import Action, DeleteTask, InlineStatusEdit, InlineTitleEdit, OpenEdit
from ..tasks.task_models import Task, TaskStatus
from .theme import (
    BOLD,
    EMPTY_COLOR,
    HEADER_COLOR,
    ID_COLOR,
    STATUS_COLOR,
    color,
    pad,
)

EMPTY_PLACEHOLDER = "No tasks available"
SEP = " | "
MIN_TITLE_WIDTH = 12
ELLIPSIS = "…"


class RowAction(StrEnum):
    EDIT = "edit"
    DELETE = "delete"


class EditorKind(StrEnum):
    NONE = "none"
    INPUT = "input"
    SELECT = "select"


# -------------------- cells --------------------

@dataclass(slots=True, frozen=True)
class TextCell:
    text: str
    editable: bool = False


@dataclass(slots=True, frozen=True)
class ChoiceCell:
    value: TaskStatus
    choices: tuple[TaskStatus, ...] = tuple(TaskStatus)


@dataclass(slots=True, frozen=True)
class ActionButton:
    action: RowAction
    task_id: int
    label: str


@dataclass(slots=True, frozen=True)
class ActionsCell:
    buttons: tuple[ActionButton, ...]


Cell = TextCell | ChoiceCell | ActionsCell


# -------------------- columns --------------------

@dataclass(slots=True, frozen=True)
class Column:
    key: str
    title: str
    render: Callable[[Task], Cell]
    editor: EditorKind = EditorKind.NONE
    on_edit: Callable[[Task, str], Action] | None = None


def _edit_title(task: Task, raw: str) -> Action:
    return InlineTitleEdit(task_id=task.id, title=raw)


def _edit_status(task: Task, raw: str) -> Action:
    return InlineStatusEdit(task_id=task.id, status=TaskStatus.parse(raw))


def _action_buttons(task: Task) -> ActionsCell:
    return ActionsCell(
        buttons=(
            ActionButton(action=RowAction.EDIT, task_id=task.id, label="Edit"),
            ActionButton(action=RowAction.DELETE, task_id=task.id, label="Delete"),
        )
    )


COLUMNS: tuple[Column, ...] = (
    Column(key="id", title="ID", render=lambda t: TextCell(str(t.id))),
    Column(
        key="title",
        title="Title",
        render=lambda t: TextCell(t.title, editable=True),
        editor=EditorKind.INPUT,
        on_edit=_edit_title,
    ),
    Column(
        key="status",
        title="Status",
        render=lambda t: ChoiceCell(t.status),
        editor=EditorKind.SELECT,
        on_edit=_edit_status,
    ),
    Column(key="actions", title="Actions", render=_action_buttons),
)

COLUMN_BY_KEY: dict[str, Column] = {c.key: c for c in COLUMNS}


def row_action_to_action(action: RowAction, task_id: int) -> Action:
    """Translate a clicked row button into a reducer action."""
    if action is RowAction.EDIT:
        return OpenEdit(task_id=task_id)
    if action is RowAction.DELETE:
        return DeleteTask(task_id=task_id)
    raise ValueError(f"Unknown row action: {action!r}")


def cell_edit_to_action(task: Task, column_key: str, raw: str) -> Action:
    """
    Translate an inline cell edit into a reducer action.

    Raises ValueError for unknown / read-only columns and for values the
    column's editor rejects (e.g. an unknown status).
    """
    column = COLUMN_BY_KEY.get(column_key)
    if column is None:
        raise ValueError(f"Unknown column: {column_key!r}")
    if column.editor is EditorKind.NONE or column.on_edit is None:
        raise ValueError(f"Column {column.title!r} is read-only.")
    return column.on_edit(task, raw)


# -------------------- presentation state --------------------

@dataclass(slots=True, frozen=True)
class Page:
    rows: tuple[Task, ...]
    number: int
    total_pages: int
    total_rows: int


class GridView:
    def __init__(self, page_size: int = 20) -> None:
        self.page_size = max(1, int(page_size))
        self.page = 1
        self._order: list[int] | None = None

    # ---- row order ----
    def arrange(self, tasks: Iterable[Task]) -> list[Task]:
        """Apply the row order overlay. Rows the overlay has not seen keep their natural slot."""
        natural = list(tasks)
        if self._order is None:
            return natural
        by_id = {t.id: t for t in natural}
        known = set(self._order)
        arranged = [by_id[tid] for tid in self._order if tid in by_id]
        for idx, task in enumerate(natural):
            if task.id not in known:
                arranged.insert(min(idx, len(arranged)), task)
        return arranged

    def move_row(self, tasks: Sequence[Task], task_id: int, position: int) -> bool:
        """Move a row to a 1-based display position (clamped). False if the id is not shown."""
        ids = [t.id for t in self.arrange(tasks)]
        if task_id not in ids:
            return False
        ids.remove(task_id)
        idx = min(max(position, 1), len(ids) + 1) - 1
        ids.insert(idx, task_id)
        self._order = ids
        return True

    # ---- pagination ----
    def page_of(self, rows: Sequence[Task]) -> Page:
        total = len(rows)
        total_pages = max(1, math.ceil(total / self.page_size))
        self.page = min(max(self.page, 1), total_pages)
        start = (self.page - 1) * self.page_size
        return Page(
            rows=tuple(rows[start : start + self.page_size]),
            number=self.page,
            total_pages=total_pages,
            total_rows=total,
        )

    def set_page(self, number: int) -> None:
        self.page = max(1, int(number))

    def next_page(self) -> None:
        self.page += 1

    def prev_page(self) -> None:
        self.page = max(1, self.page - 1)

    # ---- cells ----
    @staticmethod
    def build(page: Page, columns: Sequence[Column] = COLUMNS) -> list[list[Cell]]:
        return [[c.render(task) for c in columns] for task in page.rows]


# -------------------- text rendering --------------------

def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    if width <= 1:
        return text[:width]
    return text[: width - 1] + ELLIPSIS


def _cell_plain(cell: Cell) -> str:
    if isinstance(cell, TextCell):
        return cell.text
    if isinstance(cell, ChoiceCell):
        return cell.value.value
    return " ".join(f"[{b.label}]" for b in cell.buttons)


def _cell_colored(cell: Cell, column: Column, width: int) -> str:
    text = _truncate(_cell_plain(cell), width)
    if isinstance(cell, ChoiceCell):
        return color(text, STATUS_COLOR.get(cell.value, ""))
    if column.key == "id":
        return color(text, ID_COLOR)
    return text


def _column_widths(cells: list[list[Cell]], columns: Sequence[Column], term_width: int) -> list[int]:
    widths = [len(c.title) for c in columns]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(_cell_plain(cell)))
    for i, c in enumerate(columns):
        if c.key == "status":
            widths[i] = max(widths[i], max(len(s.value) for s in TaskStatus))

    # The title column absorbs whatever the terminal does not have room for.
    if "title" in COLUMN_BY_KEY and COLUMN_BY_KEY["title"] in columns:
        ti = list(columns).index(COLUMN_BY_KEY["title"])
        fixed = sum(w for i, w in enumerate(widths) if i != ti) + len(SEP) * (len(columns) - 1)
        widths[ti] = max(MIN_TITLE_WIDTH, min(widths[ti], term_width - fixed))
    return widths


def render_grid(page: Page, columns: Sequence[Column] = COLUMNS, term_width: int | None = None) -> list[str]:
    """Render one page of rows as text lines (header, rule, rows)."""
    if page.total_rows == 0:
        return [color(EMPTY_PLACEHOLDER, EMPTY_COLOR)]

    if term_width is None:
        term_width = shutil.get_terminal_size((120, 30)).columns

    cells = GridView.build(page, columns)
    widths = _column_widths(cells, columns, term_width)

    lines = [
        SEP.join(pad(color(c.title, HEADER_COLOR, BOLD), w) for c, w in zip(columns, widths)),
        SEP.join(color("-" * w, HEADER_COLOR) for w in widths),
    ]
    for row in cells:
        lines.append(
            SEP.join(pad(_cell_colored(cell, col, w), w) for cell, col, w in zip(row, columns, widths)).rstrip()
        )
    lines.append(f"page {page.number}/{page.total_pages} ({page.total_rows} rows)")
    return lines
