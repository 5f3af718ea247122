from __future__ import annotations

import dataclasses
import random
import uuid

import pytest

from todolist.domain.entities import TodoIcon, TodoItem
from todolist.domain.util import SAMPLE_TASKS, generate_random_todo_item


def test_todo_item_defaults_to_square_icon_and_fresh_id() -> None:
    first = TodoItem("Learn state")
    second = TodoItem("Learn state")

    assert first.icon is TodoIcon.SQUARE
    assert isinstance(first.id, uuid.UUID)
    assert first.id != second.id
    assert first != second


def test_todo_item_is_immutable() -> None:
    item = TodoItem("Learn state")
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.task = "changed"  # type: ignore[misc]


def test_with_task_keeps_identity() -> None:
    item = TodoItem("Learn state", TodoIcon.DONE)

    renamed = item.with_task("Learn more state")

    assert renamed.id == item.id
    assert renamed.icon is TodoIcon.DONE
    assert item.task == "Learn state"


def test_with_icon_keeps_identity() -> None:
    item = TodoItem("Learn state")

    assert item.with_icon(TodoIcon.TRASH) == TodoItem("Learn state", TodoIcon.TRASH, item.id)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"task": 42},
        {"task": "ok", "icon": "SQUARE"},
        {"task": "ok", "id": "not-a-uuid"},
    ],
)
def test_todo_item_rejects_wrong_types(kwargs):
    with pytest.raises(TypeError):
        TodoItem(**kwargs)


@pytest.mark.parametrize("name,icon", [("event", TodoIcon.EVENT), (" Trash ", TodoIcon.TRASH), ("DONE", TodoIcon.DONE)])
def test_icon_from_name(name, icon):
    assert TodoIcon.from_name(name) is icon


def test_icon_from_unknown_name_raises() -> None:
    with pytest.raises(ValueError):
        TodoIcon.from_name("Calendar")


def test_generate_random_todo_item_uses_sample_tasks() -> None:
    rng = random.Random(7)
    items = [generate_random_todo_item(rng) for _ in range(20)]

    assert all(item.task in SAMPLE_TASKS for item in items)
    assert len({item.id for item in items}) == 20


def test_generate_random_todo_item_is_deterministic_with_seed() -> None:
    a = generate_random_todo_item(random.Random(3))
    b = generate_random_todo_item(random.Random(3))

    assert (a.task, a.icon) == (b.task, b.icon)
