from __future__ import annotations

"""Domain value objects shared across view models and views."""

from dataclasses import dataclass, field, replace
from enum import Enum
import uuid


class TodoIcon(Enum):
    """Icon/category tag shown next to a to-do entry."""

    SQUARE = "Expand"
    DONE = "Done"
    EVENT = "Event"
    PRIVACY = "Privacy"
    TRASH = "Trash"

    @property
    def description(self) -> str:
        """Human-readable label used by pickers and accessibility text."""
        return self.value

    @classmethod
    def default(cls) -> "TodoIcon":
        return cls.SQUARE

    @classmethod
    def from_name(cls, name: str) -> "TodoIcon":
        """Parse a member name case-insensitively (``"event"`` -> ``EVENT``)."""
        text = (name or "").strip().upper()
        try:
            return cls[text]
        except KeyError:
            raise ValueError(f"Unknown todo icon '{name}'") from None


@dataclass(frozen=True)
class TodoItem:
    """Immutable to-do entry.

    Editing never mutates an item: build a copy with the same ``id`` and
    substitute it into the list.
    """

    task: str
    """Task label entered by the user."""

    icon: TodoIcon = field(default_factory=TodoIcon.default)
    """Category tag rendered as an icon."""

    id: uuid.UUID = field(default_factory=uuid.uuid4)
    """Identifier assigned at creation time; unique per item."""

    def __post_init__(self) -> None:
        if not isinstance(self.task, str):
            raise TypeError("TodoItem.task must be a string.")
        if not isinstance(self.icon, TodoIcon):
            raise TypeError("TodoItem.icon must be a TodoIcon.")
        if not isinstance(self.id, uuid.UUID):
            raise TypeError("TodoItem.id must be a UUID.")

    def with_task(self, task: str) -> "TodoItem":
        return replace(self, task=task)

    def with_icon(self, icon: TodoIcon) -> "TodoItem":
        return replace(self, icon=icon)


__all__ = ["TodoIcon", "TodoItem"]
