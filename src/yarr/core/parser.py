# src/yarr/core/parser.py

"""
Text -> Command.

Patterns are compiled once and tried in a fixed priority order; the first
full match wins. Each matcher then validates its arguments and either builds
a Command or raises one of the errors from `errors.py`. Parsing is pure.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime
from typing import Final

from ..tasks.task_models import Deadline, Event, Todo
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    ToggleMarkCommand,
)
from .errors import (
    InvalidDateFormat,
    InvalidDateRange,
    InvalidIndexFormat,
    MalformedDeadline,
    MalformedEvent,
    MissingKeyword,
    UnrecognizedCommand,
)

logger = logging.getLogger(__name__)

# dd/MM/yyyy HHmm, zero-padded, 24h. Checked with a regex first because
# strptime alone accepts "1/1/2025 900".
DATETIME_RE: Final = re.compile(r"(\d{2})/(\d{2})/(\d{4}) (\d{2})(\d{2})", re.ASCII)
INDEX_RE: Final = re.compile(r"\d+", re.ASCII)

BY_SEP: Final[str] = "/by"
FROM_SEP: Final[str] = "/from"
TO_SEP: Final[str] = "/to"

Builder = Callable[[re.Match[str]], Command]


def parse_datetime(text: str) -> datetime:
    """Parse "dd/MM/yyyy HHmm" exactly; raise InvalidDateFormat otherwise."""
    m = DATETIME_RE.fullmatch(text)
    if not m:
        raise InvalidDateFormat()
    day, month, year, hour, minute = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError as e:
        raise InvalidDateFormat() from e


def _parse_index(token: str) -> int:
    if not INDEX_RE.fullmatch(token):
        raise InvalidIndexFormat()
    return int(token)


# ---- per-kind builders ----


def _build_exit(_m: re.Match[str]) -> Command:
    return ExitCommand()


def _build_list(_m: re.Match[str]) -> Command:
    return ListCommand()


def _build_mark(m: re.Match[str]) -> Command:
    return ToggleMarkCommand(index=_parse_index(m.group(1)), done=True)


def _build_unmark(m: re.Match[str]) -> Command:
    return ToggleMarkCommand(index=_parse_index(m.group(1)), done=False)


def _build_delete(m: re.Match[str]) -> Command:
    return DeleteCommand(index=_parse_index(m.group(1)))


def _build_todo(m: re.Match[str]) -> Command:
    return AddCommand(Todo(m.group(1).strip()))


def _build_deadline(m: re.Match[str]) -> Command:
    body = m.group(1).strip()
    description, sep, rest = body.partition(BY_SEP)
    description, rest = description.strip(), rest.strip()
    if not sep or not description or not rest:
        raise MalformedDeadline()
    return AddCommand(Deadline(description, by=parse_datetime(rest)))


def _build_event(m: re.Match[str]) -> Command:
    body = m.group(1).strip()
    description, sep, rest = body.partition(FROM_SEP)
    if not sep:
        raise MalformedEvent()
    start_text, sep, end_text = rest.partition(TO_SEP)
    if not sep:
        raise MalformedEvent()

    description, start_text, end_text = description.strip(), start_text.strip(), end_text.strip()
    if not description or not start_text or not end_text:
        raise MalformedEvent()

    start = parse_datetime(start_text)
    end = parse_datetime(end_text)
    if not start < end:
        raise InvalidDateRange()
    return AddCommand(Event(description, start=start, end=end))


def _build_find(m: re.Match[str]) -> Command:
    keyword = m.group(1)
    if not keyword:
        raise MissingKeyword()
    return FindCommand(keyword)


# Priority order matters: first full match wins.
PATTERNS: Final[tuple[tuple[str, re.Pattern[str], Builder], ...]] = (
    ("exit", re.compile(r"bye"), _build_exit),
    ("list", re.compile(r"list"), _build_list),
    ("mark", re.compile(r"mark\s(\S+)"), _build_mark),
    ("unmark", re.compile(r"unmark\s(\S+)"), _build_unmark),
    ("delete", re.compile(r"delete\s(\S+)"), _build_delete),
    ("todo", re.compile(r"todo\s+(\S.*)", re.DOTALL), _build_todo),
    ("deadline", re.compile(r"deadline\s+(\S.*)", re.DOTALL), _build_deadline),
    ("event", re.compile(r"event\s+(\S.*)", re.DOTALL), _build_event),
    ("find", re.compile(r"find(?:\s(\S*))?"), _build_find),
)


def parse_command(line: str) -> Command:
    """
    Classify one input line and build its Command.

    Raises a YarrError subclass when the line is not a valid command.
    """
    for name, pattern, build in PATTERNS:
        m = pattern.fullmatch(line)
        if m is None:
            continue
        logger.debug("Input classified as %s", name)
        return build(m)

    raise UnrecognizedCommand()
