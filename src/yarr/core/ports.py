# src/yarr/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations, so the
console front end and the SQLite store stay swappable and tests can use fakes.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class Ui(Protocol):
    """Renders a message to the user. Must not raise."""

    def print_message(self, text: str) -> None: ...


class TaskRepo(Protocol):
    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Overwrite the persisted list. Raises StorageError on failure."""
        ...

    def load_tasks(self) -> list[Task]:
        """Previously saved tasks in order; [] when nothing was saved yet."""
        ...
