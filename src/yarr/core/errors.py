# src/yarr/core/errors.py

"""
Error taxonomy.

Every error carries a user-facing message in the persona's voice, so the
session can show `str(err)` as-is and keep running.
"""

from __future__ import annotations

from . import persona


class YarrError(Exception):
    """Base class for every recoverable command/storage error."""

    default_message: str = persona.UNKNOWN_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class UnrecognizedCommand(YarrError):
    default_message = persona.UNRECOGNIZED_COMMAND


class InvalidIndexFormat(YarrError):
    default_message = persona.INVALID_INDEX


class IndexOutOfRange(YarrError):
    default_message = persona.INVALID_INDEX

    def __init__(self, message: str | None = None, *, index: int | None = None, count: int | None = None) -> None:
        self.index = index
        self.count = count
        if message is None and index is not None and count is not None:
            message = persona.index_out_of_range(index, count)
        super().__init__(message)


class MalformedDeadline(YarrError):
    default_message = persona.MALFORMED_DEADLINE


class MalformedEvent(YarrError):
    default_message = persona.MALFORMED_EVENT


class InvalidDateFormat(YarrError):
    default_message = persona.INVALID_DATE_FORMAT


class InvalidDateRange(YarrError):
    default_message = persona.INVALID_DATE_RANGE


class MissingKeyword(YarrError):
    default_message = persona.MISSING_KEYWORD


class StorageError(YarrError):
    default_message = persona.STORAGE_ERROR
