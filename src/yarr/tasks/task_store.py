# src/yarr/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from pathlib import Path

from ..core.errors import StorageError
from .task_models import Task, task_from_record

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    The whole list is one table ordered by `position`. Every save rewrites it
    inside a single transaction, so a reader sees either the old list or the
    new one, never a mix.

    The file is only created on the first save; loading from a missing file
    (or one without the table) yields an empty list.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        logger.info("TaskStore ready db=%s exists=%s", self._db_path, self._db_path.exists())

    @property
    def path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _ensure_schema(cur: sqlite3.Cursor) -> None:
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                position INTEGER PRIMARY KEY,
                kind TEXT NOT NULL,
                description TEXT NOT NULL,
                is_done INTEGER NOT NULL DEFAULT 0,
                by_at TEXT,
                from_at TEXT,
                to_at TEXT
            )
            """
        )

    @staticmethod
    def _task_to_row(position: int, task: Task) -> tuple:
        rec = task.to_record()
        return (
            position,
            rec["kind"],
            rec["description"],
            1 if rec["is_done"] else 0,
            rec["by"],
            rec["from"],
            rec["to"],
        )

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return task_from_record(
            {
                "kind": row["kind"],
                "description": row["description"],
                "is_done": bool(row["is_done"]),
                "by": row["by_at"],
                "from": row["from_at"],
                "to": row["to_at"],
            }
        )

    # ---- public API ----

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        rows = [self._task_to_row(i, t) for i, t in enumerate(tasks, start=1)]
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = self._get_conn()
        except (OSError, sqlite3.Error) as e:
            raise StorageError() from e

        try:
            # `with conn` commits on success and rolls back on error.
            with conn:
                cur = conn.cursor()
                self._ensure_schema(cur)
                cur.execute("DELETE FROM tasks")
                cur.executemany(
                    """
                    INSERT INTO tasks(position, kind, description, is_done, by_at, from_at, to_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    rows,
                )
        except sqlite3.Error as e:
            raise StorageError() from e
        finally:
            conn.close()

        logger.debug("Saved %d tasks to %s", len(rows), self._db_path)

    def load_tasks(self) -> list[Task]:
        if not self._db_path.exists():
            logger.info("No task file at %s yet; starting empty.", self._db_path)
            return []

        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise StorageError() from e

        try:
            cur = conn.cursor()
            cur.execute("SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'tasks'")
            if cur.fetchone() is None:
                return []
            cur.execute("SELECT * FROM tasks ORDER BY position ASC")
            rows = cur.fetchall()
            tasks = [self._row_to_task(r) for r in rows]
        except (sqlite3.Error, ValueError, KeyError, IndexError) as e:
            raise StorageError() from e
        finally:
            conn.close()

        logger.info("Loaded %d tasks from %s", len(tasks), self._db_path)
        return tasks
