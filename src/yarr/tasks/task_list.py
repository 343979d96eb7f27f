# src/yarr/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import IndexOutOfRange
from .task_models import Task


class TaskList:
    """
    Ordered, mutable collection of tasks.

    Every index-taking method uses the 1-based index the user sees and
    raises IndexOutOfRange outside 1..count (never clamps).
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def count(self) -> int:
        return len(self._tasks)

    def _check(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRange(index=index, count=len(self._tasks))
        return index - 1

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def remove_at(self, index: int) -> Task:
        return self._tasks.pop(self._check(index))

    def display(self, index: int) -> str:
        return str(self.get(index))

    def snapshot(self) -> list[Task]:
        """Shallow copy of the current order, used for persistence."""
        return list(self._tasks)

    def replace_all(self, tasks: Iterable[Task]) -> None:
        self._tasks = list(tasks)

    def find(self, keyword: str) -> list[Task]:
        # Literal, case-sensitive: "Book" does not match "book".
        return [t for t in self._tasks if keyword in t.description]
