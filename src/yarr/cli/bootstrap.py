# src/yarr/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite store into AppState and loads the saved task list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(settings=settings, task_store=TaskStore(settings.tasks_db_path))
    load_saved_tasks(state)
    return state


def load_saved_tasks(state: AppState) -> None:
    """Replace the live list with the stored one. A broken store leaves it empty."""
    try:
        tasks = state.task_store.load_tasks()
    except StorageError:
        logger.exception("Failed to load tasks; starting with an empty list.")
        state.tasks = TaskList()
        state.load_failed = True
        return

    state.tasks = TaskList(tasks)
    state.load_failed = False
