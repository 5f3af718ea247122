from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest

pytest.importorskip("tkinter")

from todolist.app.main import App  # noqa: E402
from todolist.app.views.view_utils import safe_call  # noqa: E402


class FakeTodoScreen:
    """Records what the app pushes into the screen; no Tk widgets."""

    def __init__(self) -> None:
        self.rows: List[Any] = []
        self.inputs: List[Tuple[str, str, bool, bool]] = []
        self.status: Optional[Tuple[str, bool]] = None
        self.on_error = None

    def set_rows(self, rows) -> None:
        self.rows = list(rows)

    def set_input(self, text: str, icon_name: str, can_submit: bool, icons_visible: bool) -> None:
        self.inputs.append((text, icon_name, can_submit, icons_visible))

    def set_status(self, text: str, *, error: bool = False) -> None:
        self.status = (text, error)

    def fire(self, callback: str, *args: Any) -> None:
        safe_call(getattr(self, callback), *args, on_error=self.on_error)


@pytest.fixture
def app_and_view():
    view = FakeTodoScreen()
    return App(view=view), view


def test_app_renders_empty_state_on_start(app_and_view) -> None:
    app, view = app_and_view

    assert app.root is None
    assert view.rows == []
    assert view.inputs[-1] == ("", "SQUARE", False, False)
    assert view.status == ("0 item(s)", False)


def test_typing_and_adding_updates_rows_and_resets_form(app_and_view) -> None:
    app, view = app_and_view

    view.fire("on_input_text", "Water plants")
    assert view.inputs[-1] == ("Water plants", "SQUARE", True, True)

    view.fire("on_input_icon", "EVENT")
    view.fire("on_add")

    assert [(row.task, row.icon) for row in view.rows] == [("Water plants", "EVENT")]
    assert view.inputs[-1] == ("", "SQUARE", False, False)
    assert view.status == ("1 item(s)", False)


def test_select_and_edit_task_updates_edited_row(app_and_view) -> None:
    app, view = app_and_view
    view.fire("on_add_random")
    view.fire("on_add_random")
    target = view.rows[1].item_id

    view.fire("on_select", target)
    view.fire("on_edit_task", target, "Reworded")

    assert [row.editing for row in view.rows] == [False, True]
    assert view.rows[1].task == "Reworded"

    view.fire("on_save")
    assert not any(row.editing for row in view.rows)


def test_rejected_edit_is_reported_in_status_line(app_and_view, caplog) -> None:
    app, view = app_and_view
    view.fire("on_add_random")
    view.fire("on_add_random")
    first, second = (row.item_id for row in view.rows)
    view.fire("on_select", first)
    tasks_before = [row.task for row in view.rows]

    with caplog.at_level("WARNING", logger="todolist.app.main"):
        view.fire("on_edit_task", second, "wrong row")

    text, error = view.status
    assert error is True
    assert "You can only change an item with the same id as currentEditItem" in text
    assert "Todo action rejected" in caplog.text
    assert [row.task for row in view.rows] == tasks_before
    assert app.todo_vm.current_edit_item is not None
    assert str(app.todo_vm.current_edit_item.id) == first


def test_unknown_id_is_reported_not_raised(app_and_view) -> None:
    app, view = app_and_view

    view.fire("on_delete", "missing")

    assert view.status[1] is True
    assert "missing" in view.status[0]
