# todolist/app/main.py
from __future__ import annotations
import logging
import tkinter as tk
from typing import Optional

from .views.theme import apply_todo_theme
from .views.todo_screen import TodoScreenView

from ..domain.entities import TodoIcon, TodoItem
from ..domain.util import generate_random_todo_item
from ..viewmodels.todo_input_vm import TodoInputVM
from ..viewmodels.todo_vm import TodoVM
from ..viewmodels.todo_format import icon_choices, todo_rows
from ..utils import logging as logging_utils


class App:
    """Composition root: binds ``TodoScreenView`` callbacks to the view models."""

    def __init__(self, root: Optional[tk.Tk] = None, view: Optional[TodoScreenView] = None) -> None:
        """Build the window, or bind to ``view`` when one is supplied.

        Args:
            root: Tk root to host the screen; created when omitted.
            view: Pre-built screen. When given, no Tk window is created.
        """
        self._log = logging.getLogger(__name__)
        self.root = root
        self.todo_vm = TodoVM(on_changed=self._render_rows)
        self.input_vm = TodoInputVM(on_submit=self.todo_vm.add_item)

        if view is None:
            self.root = root or tk.Tk()
            self.root.title("Todo")
            self.root.minsize(480, 360)
            apply_todo_theme(self.root)
            view = TodoScreenView(self.root, icon_choices())
            view.pack(fill=tk.BOTH, expand=True)
        self.view = view
        self.view.on_input_text = self._on_input_text
        self.view.on_input_icon = self._on_input_icon
        self.view.on_add = self._on_add
        self.view.on_add_random = self._on_add_random
        self.view.on_select = self._on_select
        self.view.on_edit_task = self._on_edit_task
        self.view.on_edit_icon = self._on_edit_icon
        self.view.on_save = self.todo_vm.on_edit_done
        self.view.on_delete = self._on_delete
        self.view.on_error = self._on_error

        self._render_input()
        self._render_rows()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render_rows(self) -> None:
        rows = todo_rows(self.todo_vm)
        self.view.set_rows(rows)
        self.view.set_status(f"{len(rows)} item(s)")

    def _render_input(self) -> None:
        vm = self.input_vm
        self.view.set_input(vm.text, vm.icon.name, vm.can_submit, vm.icons_visible)

    # ------------------------------------------------------------------
    # Entry form
    # ------------------------------------------------------------------
    def _on_input_text(self, text: str) -> None:
        self.input_vm.text = text
        self._render_input()

    def _on_input_icon(self, icon_name: str) -> None:
        self.input_vm.icon = TodoIcon.from_name(icon_name)
        self._render_input()

    def _on_add(self) -> None:
        item = self.input_vm.submit()
        if item is not None:
            self._log.info("Added todo '%s'", item.task)
        self._render_input()

    def _on_add_random(self) -> None:
        self.todo_vm.add_item(generate_random_todo_item())

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def _find(self, item_id: str) -> TodoItem:
        for item in self.todo_vm.todo_items:
            if str(item.id) == item_id:
                return item
        raise KeyError(f"Unknown todo id '{item_id}'")

    def _on_select(self, item_id: str) -> None:
        self.todo_vm.on_edit_item_selected(self._find(item_id))

    def _on_edit_task(self, item_id: str, text: str) -> None:
        self.todo_vm.on_edit_item_change(self._find(item_id).with_task(text))

    def _on_edit_icon(self, item_id: str, icon_name: str) -> None:
        self.todo_vm.on_edit_item_change(self._find(item_id).with_icon(TodoIcon.from_name(icon_name)))

    def _on_delete(self, item_id: str) -> None:
        self.todo_vm.remove_item(self._find(item_id))

    def _on_error(self, exc: Exception) -> None:
        self._log.warning("Todo action rejected: %s", exc)
        self.view.set_status(str(exc), error=True)


def main() -> None:
    level = logging_utils.configure_root()
    logging.getLogger(__name__).debug("Effective log level: %s", logging_utils.level_name(level))
    app = App()
    app.root.mainloop()


if __name__ == "__main__":
    main()
