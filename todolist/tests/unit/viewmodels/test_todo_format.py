from __future__ import annotations

from todolist.domain.entities import TodoIcon
from todolist.tests.unit.viewmodels.helpers import make_todo_vm_with_items
from todolist.viewmodels.todo_format import icon_choices, todo_rows


def test_rows_follow_list_order_and_mark_edited_row() -> None:
    vm, (item1, item2, item3) = make_todo_vm_with_items("a", "b", "c")
    vm.on_edit_item_selected(item2)

    rows = todo_rows(vm)

    assert [row.item_id for row in rows] == [str(item1.id), str(item2.id), str(item3.id)]
    assert [row.editing for row in rows] == [False, True, False]
    assert rows[1].icon == "SQUARE"
    assert rows[1].icon_label == "Expand"


def test_rows_without_editing() -> None:
    vm, _ = make_todo_vm_with_items("a", "b")

    assert not any(row.editing for row in todo_rows(vm))


def test_icon_choices_cover_every_icon() -> None:
    choices = icon_choices()

    assert [name for name, _ in choices] == [icon.name for icon in TodoIcon]
    assert choices[0] == ("SQUARE", "Expand")
