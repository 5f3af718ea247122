from __future__ import annotations

import random
from typing import Optional, Tuple

from .entities import TodoIcon, TodoItem

SAMPLE_TASKS: Tuple[str, ...] = (
    "Learn compose",
    "Learn state",
    "Build dynamic UIs",
    "Learn Unidirectional Data Flow",
    "Integrate LiveData",
    "Integrate ViewModel",
    "Remember to savedState!",
    "Build stateless composables",
    "Use state from stateless composables",
)


def generate_random_todo_item(rng: Optional[random.Random] = None) -> TodoItem:
    """Return a new item with a sample task label and a random icon."""
    chooser = rng or random
    task = chooser.choice(SAMPLE_TASKS)
    icon = chooser.choice(list(TodoIcon))
    return TodoItem(task, icon)
