# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from yarr.core.state import AppState
from yarr.tasks.task_store import TaskStore

from .fakes import FakeUi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="yarr",
        log_level="WARNING",
        console_timestamps=False,
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        log_dir=tmp_path,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_db_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with the real SQLite store.

    NOTE: the store is real on purpose: persistence after every mutation is
    part of what the command tests check.
    """
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def ui() -> FakeUi:
    return FakeUi()
