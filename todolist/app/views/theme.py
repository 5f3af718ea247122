"""Shared visual tokens for the desktop to-do views."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BACKGROUND = "#f6f7fb"
SURFACE = "#ffffff"
OUTLINE = "#d5dbe7"
ACCENT = "#3a5bd9"
ACCENT_ACTIVE = "#2c47b3"
INK = "#1e2533"
INK_MUTED = "#6b7588"
EDITING_ROW = "#fff4d6"
ERROR_INK = "#b42318"

EDITING_TAG = "editing"


def apply_todo_theme(root: tk.Misc) -> None:
    """Install ttk styles used by ``TodoScreenView``.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BACKGROUND)

    style.configure(".", background=BACKGROUND, foreground=INK)
    style.configure("TFrame", background=BACKGROUND)
    style.configure("TLabel", background=BACKGROUND, foreground=INK)
    style.configure("Title.TLabel", font=("TkDefaultFont", 14, "bold"))
    style.configure("Status.TLabel", foreground=INK_MUTED)
    style.configure("Error.TLabel", foreground=ERROR_INK)
    style.configure("TLabelframe", background=BACKGROUND, bordercolor=OUTLINE, relief="solid", borderwidth=1)
    style.configure("TLabelframe.Label", background=BACKGROUND, font=("TkDefaultFont", 10, "bold"))

    style.configure("TButton", padding=(10, 6), background=SURFACE, bordercolor=OUTLINE, relief="flat")
    style.map("TButton", background=[("active", "#eef1fb")])
    style.configure("Primary.TButton", background=ACCENT, foreground=SURFACE, bordercolor=ACCENT)
    style.map("Primary.TButton", background=[("active", ACCENT_ACTIVE), ("disabled", OUTLINE)])

    style.configure("Treeview", rowheight=30, fieldbackground=SURFACE, background=SURFACE, foreground=INK)
    style.configure("Treeview.Heading", background="#e8ecf7", relief="flat")
    style.map("Treeview", background=[("selected", "#dde5ff")], foreground=[("selected", INK)])


def tag_editing_rows(tree: ttk.Treeview) -> None:
    """Highlight rows carrying ``EDITING_TAG``."""
    tree.tag_configure(EDITING_TAG, background=EDITING_ROW)
