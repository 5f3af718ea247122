"""
TodoScreenView
--------------
Tkinter screen for the to-do list. This file contains **only View code**:
no list state, no validation. Every user action is signalled through the
callbacks assigned by the composition root; ``App`` pushes state back in via
``set_input``, ``set_rows`` and ``set_status``.

Layout:
  * Entry row: task text, icon picker (only while text is typed), Add
  * Item table with the row under edit highlighted
  * Inline editor for the row under edit: task, icon, Save, Delete
  * Footer: "Add random todo" and a status line
"""

from __future__ import annotations

from contextlib import contextmanager
import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .theme import EDITING_TAG, tag_editing_rows
from .view_utils import safe_call


class TodoScreenView(ttk.Frame):
    """To-do list screen: entry form, table, inline editor."""

    OnVoid = Optional[Callable[[], None]]
    OnText = Optional[Callable[[str], None]]
    OnItem = Optional[Callable[[str], None]]
    OnItemText = Optional[Callable[[str, str], None]]

    def __init__(self, parent, icon_choices: Sequence[Tuple[str, str]], **kwargs):
        """Build the screen widgets.

        Args:
            parent: Parent widget (usually the Tk root).
            icon_choices: ``(name, description)`` pairs offered by pickers.
            **kwargs: Additional frame options forwarded to ``ttk.Frame``.
        """
        super().__init__(parent, **kwargs)
        self._icon_names = [name for name, _ in icon_choices]
        self._icon_labels = [label for _, label in icon_choices]
        self._editing_id: Optional[str] = None
        self._updating = False

        # ---- Callbacks (assigned by App) ----
        self.on_input_text: TodoScreenView.OnText = None
        self.on_input_icon: TodoScreenView.OnText = None
        self.on_add: TodoScreenView.OnVoid = None
        self.on_add_random: TodoScreenView.OnVoid = None
        self.on_select: TodoScreenView.OnItem = None
        self.on_edit_task: TodoScreenView.OnItemText = None
        self.on_edit_icon: TodoScreenView.OnItemText = None
        self.on_save: TodoScreenView.OnVoid = None
        self.on_delete: TodoScreenView.OnItem = None
        self.on_error: Optional[Callable[[Exception], None]] = None

        ttk.Label(self, text="Todo", style="Title.TLabel").pack(side=tk.TOP, anchor=tk.W, padx=8, pady=(8, 4))

        # ---- Entry row ----
        entry_row = ttk.Frame(self)
        entry_row.pack(side=tk.TOP, fill=tk.X, padx=8, pady=4)
        self.var_text = tk.StringVar(value="")
        self.var_icon = tk.StringVar(value=self._icon_labels[0] if self._icon_labels else "")
        self.entry_text = ttk.Entry(entry_row, textvariable=self.var_text)
        self.entry_text.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.entry_text.bind("<Return>", lambda _e: self._emit(self.on_add))
        self.cmb_icon = ttk.Combobox(
            entry_row, textvariable=self.var_icon, values=self._icon_labels, state="readonly", width=10
        )
        self.btn_add = ttk.Button(
            entry_row, text="Add", style="Primary.TButton", command=lambda: self._emit(self.on_add), state="disabled"
        )
        self.btn_add.pack(side=tk.RIGHT, padx=(6, 0))
        self.var_text.trace_add("write", self._on_text_written)
        self.cmb_icon.bind("<<ComboboxSelected>>", self._on_icon_picked)

        # ---- Table ----
        table = ttk.Frame(self)
        table.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=4)
        self.tree = ttk.Treeview(table, columns=("icon", "task"), show="headings", selectmode="browse", height=10)
        self.tree.heading("icon", text="Icon")
        self.tree.heading("task", text="Task")
        self.tree.column("icon", width=90, anchor=tk.W, stretch=False)
        self.tree.column("task", width=320, anchor=tk.W, stretch=True)
        vsb = ttk.Scrollbar(table, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)
        tag_editing_rows(self.tree)
        self.tree.bind("<<TreeviewSelect>>", self._on_row_selected)

        # ---- Inline editor ----
        self.editor = ttk.Labelframe(self, text="Edit")
        self.var_edit_text = tk.StringVar(value="")
        self.var_edit_icon = tk.StringVar(value="")
        self.entry_edit = ttk.Entry(self.editor, textvariable=self.var_edit_text)
        self.entry_edit.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=4, pady=4)
        self.cmb_edit_icon = ttk.Combobox(
            self.editor, textvariable=self.var_edit_icon, values=self._icon_labels, state="readonly", width=10
        )
        self.cmb_edit_icon.pack(side=tk.LEFT, padx=4)
        ttk.Button(self.editor, text="Save", command=lambda: self._emit(self.on_save)).pack(side=tk.LEFT, padx=4)
        ttk.Button(self.editor, text="Delete", command=self._on_delete_click).pack(side=tk.LEFT, padx=4)
        self.var_edit_text.trace_add("write", self._on_edit_text_written)
        self.cmb_edit_icon.bind("<<ComboboxSelected>>", self._on_edit_icon_picked)

        # ---- Footer ----
        footer = ttk.Frame(self)
        footer.pack(side=tk.BOTTOM, fill=tk.X, padx=8, pady=(4, 8))
        ttk.Button(footer, text="Add random todo", command=lambda: self._emit(self.on_add_random)).pack(side=tk.LEFT)
        self.lbl_status = ttk.Label(footer, text="", style="Status.TLabel")
        self.lbl_status.pack(side=tk.RIGHT)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_input(self, text: str, icon_name: str, can_submit: bool, icons_visible: bool) -> None:
        """Mirror ``TodoInputVM`` state into the entry row."""
        with self._programmatic():
            if self.var_text.get() != text:
                self.var_text.set(text)
            self.var_icon.set(self._label_for(icon_name))
        self.btn_add.configure(state="normal" if can_submit else "disabled")
        if icons_visible:
            if not self.cmb_icon.winfo_ismapped():
                self.cmb_icon.pack(side=tk.LEFT, padx=(6, 0))
        else:
            self.cmb_icon.pack_forget()

    def set_rows(self, rows: List) -> None:
        """Replace table rows and show the editor for the row under edit.

        Args:
            rows: ``TodoRow`` DTOs from ``todo_rows``.
        """
        editing = next((row for row in rows if row.editing), None)
        with self._programmatic():
            self.tree.delete(*self.tree.get_children())
            for row in rows:
                self.tree.insert(
                    "",
                    tk.END,
                    iid=row.item_id,
                    values=(row.icon_label, row.task),
                    tags=(EDITING_TAG,) if row.editing else (),
                )
            self._editing_id = editing.item_id if editing else None
            if editing is None:
                self.editor.pack_forget()
                return
            self.tree.selection_set(editing.item_id)
            self.tree.see(editing.item_id)
            if self.var_edit_text.get() != editing.task:
                self.var_edit_text.set(editing.task)
            self.var_edit_icon.set(editing.icon_label)
        if not self.editor.winfo_ismapped():
            self.editor.pack(side=tk.TOP, fill=tk.X, padx=8, pady=4)

    def set_status(self, text: str, *, error: bool = False) -> None:
        self.lbl_status.configure(text=text, style="Error.TLabel" if error else "Status.TLabel")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _emit(self, fn: Optional[Callable[..., None]], *args) -> None:
        safe_call(fn, *args, on_error=self.on_error)

    @contextmanager
    def _programmatic(self) -> Iterator[None]:
        """Suppress variable traces while state is pushed in from the app."""
        self._updating = True
        try:
            yield
        finally:
            self._updating = False

    def _label_for(self, icon_name: str) -> str:
        if icon_name in self._icon_names:
            return self._icon_labels[self._icon_names.index(icon_name)]
        return ""

    def _name_for(self, label: str) -> Optional[str]:
        if label in self._icon_labels:
            return self._icon_names[self._icon_labels.index(label)]
        return None

    def _on_text_written(self, *_args) -> None:
        if self._updating:
            return
        self._emit(self.on_input_text, self.var_text.get())

    def _on_icon_picked(self, _event=None) -> None:
        name = self._name_for(self.var_icon.get())
        if name:
            self._emit(self.on_input_icon, name)

    def _on_row_selected(self, _event=None) -> None:
        if self._updating:
            return
        selection = self.tree.selection()
        if not selection or selection[0] == self._editing_id:
            return
        self._emit(self.on_select, selection[0])

    def _on_edit_text_written(self, *_args) -> None:
        if self._updating or self._editing_id is None:
            return
        self._emit(self.on_edit_task, self._editing_id, self.var_edit_text.get())

    def _on_edit_icon_picked(self, _event=None) -> None:
        name = self._name_for(self.var_edit_icon.get())
        if name and self._editing_id is not None:
            self._emit(self.on_edit_icon, self._editing_id, name)

    def _on_delete_click(self) -> None:
        if self._editing_id is not None:
            self._emit(self.on_delete, self._editing_id)
