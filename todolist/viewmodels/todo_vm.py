"""List state holder for the to-do screen.

Call context:
    ``App`` (desktop) and ``WebTodoVM`` (web) forward user intents to the
    command methods here and re-render when ``on_changed`` fires.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from todolist.domain.entities import TodoItem

log = logging.getLogger(__name__)

_NO_EDIT = -1


class TodoVM:
    """
    Ordered to-do list plus an optional "currently editing" slot.

    The editing slot stores a position into the list, so the edited item is
    always an element of the list; there is no way for it to dangle.
    """

    def __init__(self, *, on_changed: Optional[Callable[[], None]] = None) -> None:
        self.on_changed = on_changed
        self._items: List[TodoItem] = []
        self._edit_position: int = _NO_EDIT

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def todo_items(self) -> List[TodoItem]:
        return list(self._items)

    @property
    def current_edit_item(self) -> Optional[TodoItem]:
        if 0 <= self._edit_position < len(self._items):
            return self._items[self._edit_position]
        return None

    @property
    def current_edit_index(self) -> Optional[int]:
        return self._edit_position if self.current_edit_item is not None else None

    @property
    def is_editing(self) -> bool:
        return self.current_edit_item is not None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def add_item(self, item: TodoItem) -> None:
        self._items.append(item)
        log.debug("Added todo %s (%d items)", item.id, len(self._items))
        self._notify()

    def remove_item(self, item: TodoItem) -> None:
        """Remove ``item`` and close the editor.

        Positions shift on removal, so editing always ends here.
        """
        if item in self._items:
            self._items.remove(item)
            log.debug("Removed todo %s (%d items)", item.id, len(self._items))
        else:
            log.debug("Remove ignored, todo %s not in list", item.id)
        self._edit_position = _NO_EDIT
        self._notify()

    def on_edit_item_selected(self, item: TodoItem) -> None:
        """Start editing ``item``; an item outside the list leaves the slot idle."""
        try:
            self._edit_position = self._items.index(item)
        except ValueError:
            self._edit_position = _NO_EDIT
            log.debug("Edit selection ignored, todo %s not in list", item.id)
        else:
            log.debug("Editing todo %s at %d", item.id, self._edit_position)
        self._notify()

    def on_edit_item_change(self, item: TodoItem) -> None:
        """Replace the edited item with ``item``, which must keep its id.

        Raises:
            ValueError: Nothing is being edited, or ``item.id`` differs from
                the id of the edited item.
        """
        current = self.current_edit_item
        if current is None:
            raise ValueError(
                "You can only change an item with the same id as currentEditItem "
                f"(no item is being edited, got {item.id})"
            )
        if current.id != item.id:
            raise ValueError(
                "You can only change an item with the same id as currentEditItem "
                f"(expected {current.id}, got {item.id})"
            )
        self._items[self._edit_position] = item
        log.debug("Changed todo %s", item.id)
        self._notify()

    def on_edit_done(self) -> None:
        self._edit_position = _NO_EDIT
        self._notify()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _notify(self) -> None:
        if self.on_changed:
            self.on_changed()


__all__ = ["TodoVM"]
