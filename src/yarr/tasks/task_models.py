# src/yarr/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, Final

# User input format: day/month/year hour-minute, e.g. "20/12/2024 1800".
INPUT_DATETIME_FORMAT: Final[str] = "%d/%m/%Y %H%M"
DISPLAY_DATETIME_FORMAT: Final[str] = "%d %b %Y %H:%M"

TaskRecord = dict[str, Any]


class TaskKind(StrEnum):
    """
    Task variant tag.

    Values are also the persisted `kind` column, so do not rename them.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def icon(self) -> str:
        return {TaskKind.TODO: "T", TaskKind.DEADLINE: "D", TaskKind.EVENT: "E"}[self]


def _fmt(dt: datetime) -> str:
    return dt.strftime(DISPLAY_DATETIME_FORMAT)


def _iso(dt: datetime | None) -> str | None:
    return dt.isoformat() if dt is not None else None


@dataclass(slots=True, eq=True)
class Task:
    description: str
    is_done: bool = False

    kind = TaskKind.TODO

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")

    def mark(self, done: bool) -> None:
        self.is_done = done

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def details(self) -> str:
        """Type-specific suffix shown after the description."""
        return ""

    def __str__(self) -> str:
        return f"[{self.kind.icon}][{self.status_icon}] {self.description}{self.details()}"

    def to_record(self) -> TaskRecord:
        return {
            "kind": self.kind.value,
            "description": self.description,
            "is_done": self.is_done,
            "by": None,
            "from": None,
            "to": None,
        }


@dataclass(slots=True, eq=True)
class Todo(Task):
    kind = TaskKind.TODO


@dataclass(slots=True, eq=True, kw_only=True)
class Deadline(Task):
    by: datetime

    kind = TaskKind.DEADLINE

    def details(self) -> str:
        return f" (by: {_fmt(self.by)})"

    def to_record(self) -> TaskRecord:
        rec = Task.to_record(self)
        rec["by"] = _iso(self.by)
        return rec


@dataclass(slots=True, eq=True, kw_only=True)
class Event(Task):
    start: datetime
    end: datetime

    kind = TaskKind.EVENT

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        if not self.start < self.end:
            raise ValueError("event start must be before its end")

    def details(self) -> str:
        return f" (from: {_fmt(self.start)} to: {_fmt(self.end)})"

    def to_record(self) -> TaskRecord:
        rec = Task.to_record(self)
        rec["from"] = _iso(self.start)
        rec["to"] = _iso(self.end)
        return rec


def _required_dt(record: TaskRecord, key: str) -> datetime:
    raw = record.get(key)
    if not raw or not isinstance(raw, str):
        raise ValueError(f"{record.get('kind')} record is missing '{key}'")
    return datetime.fromisoformat(raw)


def task_from_record(record: TaskRecord) -> Task:
    """
    Rebuild a Task from its record (the inverse of Task.to_record()).

    Raises ValueError on unknown kinds or missing/invalid fields.
    """
    kind = TaskKind(str(record.get("kind")))
    description = str(record.get("description") or "")
    is_done = bool(record.get("is_done"))

    if kind is TaskKind.TODO:
        return Todo(description, is_done)
    if kind is TaskKind.DEADLINE:
        return Deadline(description, is_done, by=_required_dt(record, "by"))
    return Event(
        description,
        is_done,
        start=_required_dt(record, "from"),
        end=_required_dt(record, "to"),
    )
