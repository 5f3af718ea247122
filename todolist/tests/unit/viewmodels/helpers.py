from __future__ import annotations

from typing import Tuple

from todolist.domain.entities import TodoIcon, TodoItem
from todolist.viewmodels.todo_vm import TodoVM


def make_todo_vm_with_items(*tasks: str) -> Tuple[TodoVM, Tuple[TodoItem, ...]]:
    vm = TodoVM()
    items = tuple(TodoItem(task, TodoIcon.default()) for task in tasks)
    for item in items:
        vm.add_item(item)
    return vm, items


__all__ = ["make_todo_vm_with_items"]
