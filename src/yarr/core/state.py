# src/yarr/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    """
    One session: the live task list plus the collaborators it needs.

    Only the command executor mutates `tasks`.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: Any
    task_store: TaskRepo

    tasks: TaskList = field(default_factory=TaskList)
    running: bool = True
    # True while the in-memory list may be ahead of the store.
    unpersisted: bool = False
    load_failed: bool = False
