"""NiceGUI entrypoint for the to-do web runtime."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Callable

from nicegui import ui

from todolist.utils import logging as logging_utils
from todolist.viewmodels.todo_format import icon_choices
from todolist.web_ui.viewmodels import WebTodoVM

log = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --todo-bg: #f6f7fb;
  --todo-card: #ffffff;
  --todo-border: #d5dbe7;
  --todo-editing: #fff4d6;
}
body { background: var(--todo-bg); }
.todo-card {
  background: var(--todo-card);
  border: 1px solid var(--todo-border);
  border-radius: 10px;
}
.todo-editing { background: var(--todo-editing); }
</style>
        """
    )


def _notify_error(exc: Exception) -> None:
    """Render rejected actions as concise NiceGUI toasts."""
    log.warning("Todo action rejected: %s", exc)
    ui.notify(str(exc), color="negative", close_button="OK")


def _build_ui() -> None:
    """Register the NiceGUI page. Each browser client gets its own list."""

    icons = dict(icon_choices())

    @ui.page("/")
    async def index() -> None:
        vm = WebTodoVM()

        def _invoke(action: Callable[[], Any], *refreshers: Callable[[], None]) -> None:
            try:
                action()
            except (KeyError, ValueError) as exc:
                _notify_error(exc)
            for refresh in refreshers:
                refresh()

        @ui.refreshable
        def render_input() -> None:
            with ui.row().classes("w-full items-center todo-card q-pa-sm"):
                ui.input(
                    "New task",
                    value=vm.input_vm.text,
                    on_change=lambda e: _invoke(lambda: vm.set_input_text(e.value), sync_input),
                ).classes("col-grow").on("keydown.enter", lambda: _invoke(vm.add_from_form, render_input, render_list))
                icon_select = ui.select(
                    icons,
                    value=vm.input_vm.icon.name,
                    label="Icon",
                    on_change=lambda e: _invoke(lambda: vm.set_input_icon(str(e.value))),
                ).props("dense outlined")
                add_button = ui.button(
                    "Add",
                    color="primary",
                    on_click=lambda: _invoke(vm.add_from_form, render_input, render_list),
                )

            def sync_input() -> None:
                """Toggle picker and button in place; the text field keeps focus."""
                flags = vm.input_flags()
                icon_select.set_visibility(flags["icons_visible"])
                add_button.set_enabled(flags["can_submit"])

            sync_input()

        @ui.refreshable
        def render_list() -> None:
            rows = vm.rows()
            with ui.column().classes("w-full todo-card q-pa-sm"):
                if not rows:
                    ui.label("Nothing to do yet.").classes("text-grey-7")
                for row in rows:
                    if row["editing"]:
                        render_editor(row)
                        continue
                    with ui.row().classes("w-full items-center cursor-pointer").on(
                        "click", lambda _, i=row["item_id"]: _invoke(lambda: vm.select(i), render_list)
                    ):
                        ui.badge(row["icon_label"], color="grey-6")
                        ui.label(row["task"])
                ui.label(f"{len(rows)} item(s)").classes("text-caption text-grey-7")

        def render_editor(row: dict) -> None:
            item_id = row["item_id"]
            with ui.row().classes("w-full items-center todo-editing q-pa-xs"):
                ui.input(
                    value=row["task"],
                    on_change=lambda e: _invoke(lambda: vm.rename(item_id, e.value)),
                ).classes("col-grow")
                ui.select(
                    icons,
                    value=row["icon"],
                    on_change=lambda e: _invoke(lambda: vm.set_icon(item_id, str(e.value)), render_list),
                ).props("dense outlined")
                ui.button("Save", on_click=lambda: _invoke(vm.done, render_list))
                ui.button("Delete", color="negative", on_click=lambda: _invoke(lambda: vm.remove(item_id), render_list))

        with ui.column().classes("w-full max-w-2xl mx-auto q-pa-md"):
            ui.label("Todo").classes("text-h5")
            render_input()
            render_list()
            ui.button("Add random todo", on_click=lambda: _invoke(vm.add_random, render_list)).props("flat")


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the to-do NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    level = logging_utils.configure_root()
    log.debug("Effective log level: %s", logging_utils.level_name(level))
    if args.smoke_test:
        vm = WebTodoVM()
        vm.add_random()
        print("web-smoke-ok", len(vm.rows()))
        return
    _install_theme()
    _build_ui()
    ui.run(
        host=args.host,
        port=args.port,
        title="Todo",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("TODOLIST_WEB_STORAGE_SECRET", "todolist-web-secret"),
    )


if __name__ == "__main__":
    main()
