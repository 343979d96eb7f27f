# tests/test_task_list.py

from __future__ import annotations

import pytest

from yarr.core.errors import IndexOutOfRange
from yarr.tasks.task_list import TaskList
from yarr.tasks.task_models import Todo


def _list(*names: str) -> TaskList:
    return TaskList(Todo(n) for n in names)


def test_append_and_count() -> None:
    tasks = TaskList()
    assert tasks.count == 0
    tasks.append(Todo("a"))
    tasks.append(Todo("b"))
    assert tasks.count == 2
    assert [t.description for t in tasks] == ["a", "b"]


@pytest.mark.parametrize("index", [0, -1, 4, 100])
def test_index_bounds_are_not_clamped(index: int) -> None:
    tasks = _list("a", "b", "c")
    with pytest.raises(IndexOutOfRange) as exc:
        tasks.get(index)
    assert exc.value.index == index
    assert exc.value.count == 3
    with pytest.raises(IndexOutOfRange):
        tasks.remove_at(index)
    assert tasks.count == 3


def test_remove_at_shifts_later_tasks() -> None:
    tasks = _list("a", "b", "c", "d")
    removed = tasks.remove_at(2)
    assert removed.description == "b"
    assert [t.description for t in tasks] == ["a", "c", "d"]
    assert tasks.get(2).description == "c"


def test_display() -> None:
    tasks = _list("a")
    assert tasks.display(1) == "[T][ ] a"


def test_snapshot_is_a_copy() -> None:
    tasks = _list("a")
    snap = tasks.snapshot()
    tasks.append(Todo("b"))
    assert len(snap) == 1


def test_find_keeps_order_and_is_case_sensitive() -> None:
    tasks = _list("read book", "return Book", "buy rum", "bookmark page")
    assert [t.description for t in tasks.find("book")] == ["read book", "bookmark page"]
    assert [t.description for t in tasks.find("Book")] == ["return Book"]
    assert tasks.find("parrot") == []
