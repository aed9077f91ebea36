# tests/test_grid.py

from __future__ import annotations

import pytest

from taskgrid.tasks.task_actions import DeleteTask, InlineStatusEdit, InlineTitleEdit, OpenEdit
from taskgrid.tasks.task_models import Task, TaskState, TaskStatus
from taskgrid.ui.grid import (
    COLUMNS,
    EMPTY_PLACEHOLDER,
    ActionsCell,
    ChoiceCell,
    GridView,
    Page,
    RowAction,
    TextCell,
    cell_edit_to_action,
    render_grid,
    row_action_to_action,
)
from taskgrid.ui.theme import ANSI_RE


def _plain(lines: list[str]) -> list[str]:
    return [ANSI_RE.sub("", line) for line in lines]


def _tasks(n: int) -> list[Task]:
    return [Task(id=i, title=f"task {i}") for i in range(1, n + 1)]


def test_columns_render_typed_cells() -> None:
    task = Task(id=7, title="Buy milk", status=TaskStatus.IN_PROGRESS)
    cells = [c.render(task) for c in COLUMNS]

    assert [c.key for c in COLUMNS] == ["id", "title", "status", "actions"]
    assert cells[0] == TextCell("7")
    assert cells[1] == TextCell("Buy milk", editable=True)
    assert cells[2] == ChoiceCell(TaskStatus.IN_PROGRESS)
    assert isinstance(cells[3], ActionsCell)
    assert [(b.action, b.task_id) for b in cells[3].buttons] == [
        (RowAction.EDIT, 7),
        (RowAction.DELETE, 7),
    ]


def test_row_buttons_dispatch_on_action_identifier() -> None:
    task = Task(id=3, title="x")
    buttons = COLUMNS[3].render(task).buttons  # type: ignore[union-attr]
    actions = [row_action_to_action(b.action, b.task_id) for b in buttons]
    assert actions == [OpenEdit(task_id=3), DeleteTask(task_id=3)]


def test_cell_edits() -> None:
    task = Task(id=2, title="old")
    assert cell_edit_to_action(task, "status", "ip") == InlineStatusEdit(2, TaskStatus.IN_PROGRESS)
    assert cell_edit_to_action(task, "title", "new") == InlineTitleEdit(2, "new")

    with pytest.raises(ValueError, match="read-only"):
        cell_edit_to_action(task, "id", "5")
    with pytest.raises(ValueError):
        cell_edit_to_action(task, "status", "someday")
    with pytest.raises(ValueError):
        cell_edit_to_action(task, "owner", "me")


def test_move_row_is_presentation_only() -> None:
    tasks = _tasks(4)
    original = list(tasks)
    grid = GridView()

    assert grid.move_row(tasks, 4, 1) is True
    assert [t.id for t in grid.arrange(tasks)] == [4, 1, 2, 3]
    assert tasks == original

    assert grid.move_row(tasks, 99, 1) is False

    # A task added later (prepended) shows up at its natural slot.
    newer = [Task(id=5, title="new"), *tasks]
    assert [t.id for t in grid.arrange(newer)] == [5, 4, 1, 2, 3]

    # Deleted rows just disappear from the overlay.
    assert [t.id for t in grid.arrange([t for t in tasks if t.id != 4])] == [1, 2, 3]


def test_move_row_clamps_position() -> None:
    tasks = _tasks(3)
    grid = GridView()
    grid.move_row(tasks, 1, 50)
    assert [t.id for t in grid.arrange(tasks)] == [2, 3, 1]


def test_pagination_clamps_into_range() -> None:
    rows = _tasks(45)
    grid = GridView(page_size=20)

    first = grid.page_of(rows)
    assert (first.number, first.total_pages, len(first.rows)) == (1, 3, 20)

    grid.set_page(3)
    last = grid.page_of(rows)
    assert [t.id for t in last.rows] == [41, 42, 43, 44, 45]

    grid.next_page()
    assert grid.page_of(rows).number == 3

    # Filtering shrinks the set: the page snaps back.
    assert grid.page_of(rows[:5]).number == 1


def test_render_empty_placeholder() -> None:
    page = GridView().page_of([])
    assert page == Page(rows=(), number=1, total_pages=1, total_rows=0)
    assert _plain(render_grid(page)) == [EMPTY_PLACEHOLDER]


def test_render_truncates_long_titles() -> None:
    long_title = "x" * 200
    page = GridView().page_of([Task(id=1, title=long_title, status=TaskStatus.DONE)])
    lines = _plain(render_grid(page, term_width=80))

    assert lines[0].startswith("ID")
    assert "[Edit] [Delete]" in lines[2]
    assert "Done" in lines[2]
    assert long_title not in lines[2]
    assert "…" in lines[2]
    assert lines[-1] == "page 1/1 (1 rows)"


def test_state_is_untouched_by_grid(loaded_state: TaskState) -> None:
    grid = GridView(page_size=2)
    grid.move_row(loaded_state.tasks, 3, 1)
    grid.next_page()
    grid.page_of(grid.arrange(loaded_state.tasks))
    assert [t.id for t in loaded_state.tasks] == [1, 2, 3, 4]
