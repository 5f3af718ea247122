"""Thin web-facing viewmodel for NiceGUI bindings.

``WebTodoVM`` holds the per-page ``TodoVM`` and ``TodoInputVM`` and speaks in
string ids and plain dicts, which is what browser widgets hand back.
"""

from __future__ import annotations

from dataclasses import asdict
import logging
import random
from typing import Any, Dict, List, Optional

from todolist.domain.entities import TodoIcon, TodoItem
from todolist.domain.util import generate_random_todo_item
from todolist.viewmodels.todo_format import todo_rows
from todolist.viewmodels.todo_input_vm import TodoInputVM
from todolist.viewmodels.todo_vm import TodoVM

log = logging.getLogger(__name__)


class WebTodoVM:
    """Browser projection of the to-do list view models."""

    def __init__(self, *, rng: Optional[random.Random] = None) -> None:
        self.todo_vm = TodoVM()
        self.input_vm = TodoInputVM(on_submit=self.todo_vm.add_item)
        self._rng = rng

    def rows(self) -> List[Dict[str, Any]]:
        return [asdict(row) for row in todo_rows(self.todo_vm)]

    def editing_row(self) -> Optional[Dict[str, Any]]:
        return next((row for row in self.rows() if row["editing"]), None)

    # ---- Entry form ----
    def set_input_text(self, text: Any) -> None:
        self.input_vm.text = str(text or "")

    def set_input_icon(self, icon_name: str) -> None:
        self.input_vm.icon = TodoIcon.from_name(icon_name)

    def input_flags(self) -> Dict[str, bool]:
        """Visibility/enabled state for the entry row widgets."""
        return {
            "can_submit": self.input_vm.can_submit,
            "icons_visible": self.input_vm.icons_visible,
        }

    def add_from_form(self) -> Optional[TodoItem]:
        return self.input_vm.submit()

    def add_random(self) -> TodoItem:
        item = generate_random_todo_item(self._rng)
        self.todo_vm.add_item(item)
        return item

    # ---- Editing ----
    def select(self, item_id: str) -> None:
        self.todo_vm.on_edit_item_selected(self._find(item_id))

    def rename(self, item_id: str, task: Any) -> None:
        self.todo_vm.on_edit_item_change(self._find(item_id).with_task(str(task or "")))

    def set_icon(self, item_id: str, icon_name: str) -> None:
        icon = TodoIcon.from_name(icon_name)
        self.todo_vm.on_edit_item_change(self._find(item_id).with_icon(icon))

    def remove(self, item_id: str) -> None:
        self.todo_vm.remove_item(self._find(item_id))

    def done(self) -> None:
        self.todo_vm.on_edit_done()

    def _find(self, item_id: str) -> TodoItem:
        for item in self.todo_vm.todo_items:
            if str(item.id) == item_id:
                return item
        log.debug("Lookup failed for todo id %s", item_id)
        raise KeyError(f"Unknown todo id '{item_id}'")


__all__ = ["WebTodoVM"]
