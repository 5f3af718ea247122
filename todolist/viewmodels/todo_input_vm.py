from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional

from todolist.domain.entities import TodoIcon, TodoItem


@dataclass
class TodoInputVM:
    """Entry-form state: task text and icon for the next item.

    - Does not touch the list; ``submit`` hands the built item to
      ``on_submit`` (usually ``TodoVM.add_item``)
    - Icon picker is only offered once some text was typed
    """

    on_submit: Optional[Callable[[TodoItem], None]] = None

    text: str = ""
    icon: TodoIcon = field(default_factory=TodoIcon.default)

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip())

    @property
    def icons_visible(self) -> bool:
        return self.can_submit

    def build_item(self) -> TodoItem:
        task = self.text.strip()
        if not task:
            raise ValueError("Task text must not be blank")
        return TodoItem(task, self.icon)

    def submit(self) -> Optional[TodoItem]:
        if not self.can_submit:
            return None
        item = self.build_item()
        if self.on_submit:
            self.on_submit(item)
        self.reset()
        return item

    def reset(self) -> None:
        self.text = ""
        self.icon = TodoIcon.default()
