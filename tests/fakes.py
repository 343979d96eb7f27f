# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from yarr.core.errors import StorageError
from yarr.tasks.task_models import Task


@dataclass(slots=True)
class FakeUi:
    """Ui that records every message instead of printing it."""

    messages: list[str] = field(default_factory=list)

    def print_message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def last(self) -> str:
        return self.messages[-1]


class FlakyTaskStore:
    """
    In-memory TaskRepo whose first `fail_saves` saves raise StorageError.

    `saved` holds what the last successful save wrote.
    """

    def __init__(self, *, fail_saves: int = 0, fail_load: bool = False) -> None:
        self.fail_saves = fail_saves
        self.fail_load = fail_load
        self.save_calls = 0
        self.saved: list[Task] = []

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        self.save_calls += 1
        if self.fail_saves > 0:
            self.fail_saves -= 1
            raise StorageError()
        self.saved = list(tasks)

    def load_tasks(self) -> list[Task]:
        if self.fail_load:
            raise StorageError()
        return list(self.saved)
