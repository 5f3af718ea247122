"""Row projection helpers shared by the desktop and web views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from todolist.domain.entities import TodoIcon
from .todo_vm import TodoVM


@dataclass
class TodoRow:
    """Display row consumed by the to-do table widgets."""
    item_id: str
    task: str
    icon: str
    icon_label: str
    editing: bool


def todo_rows(vm: TodoVM) -> List[TodoRow]:
    """Return one row per list entry, in list order."""
    editing_index = vm.current_edit_index
    rows: List[TodoRow] = []
    for index, item in enumerate(vm.todo_items):
        rows.append(
            TodoRow(
                item_id=str(item.id),
                task=item.task,
                icon=item.icon.name,
                icon_label=item.icon.description,
                editing=index == editing_index,
            )
        )
    return rows


def icon_choices() -> List[Tuple[str, str]]:
    return [(icon.name, icon.description) for icon in TodoIcon]


__all__ = ["TodoRow", "icon_choices", "todo_rows"]
