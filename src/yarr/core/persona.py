# src/yarr/core/persona.py

"""
Everything yarr says to the user, in one place.

Front ends forward these strings verbatim; tests match on them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

APP_TITLE: Final[str] = "Yarr: The Pirate Task Manager"

GREETING: Final[str] = "Ahoy, matey! I be Yarr, keeper of yer task log.\nWhat be yer orders?"
GREETING_LOAD_FAILED: Final[str] = (
    "Blunder! Me treasure chest of tasks be cracked and unreadable.\n"
    "We set sail with an empty log, captain."
)
FAREWELL: Final[str] = "Fair winds and followin' seas, captain! Until we meet again."

# ---- errors ----

UNKNOWN_ERROR: Final[str] = "Blunder! Somethin' went awry on deck."
UNRECOGNIZED_COMMAND: Final[str] = "Arrr, me apologies! I cannot fathom that."
INVALID_INDEX: Final[str] = (
    "Blunder! I be searchin' the seas but couldn't spy the task ye named, me heartie!"
)
MALFORMED_DEADLINE: Final[str] = (
    "Blunder! Declare yer deadline as such: 'deadline * /by *', ye scurvy dog!"
)
MALFORMED_EVENT: Final[str] = (
    "Blunder! Declare yer event as such: 'event * /from * /to *', ye scurvy dog!"
)
INVALID_DATE_FORMAT: Final[str] = (
    "Blunder! The date format ye provided be as tangled as a ship's riggin'.\n"
    "Write yer dates in the format dd/MM/yyyy HHmm, ye scurvy dog!"
)
INVALID_DATE_RANGE: Final[str] = (
    "Blunder! The start of yer event must come before its end, ye scurvy dog!"
)
MISSING_KEYWORD: Final[str] = "Blunder! Tell me what to search for: 'find <word>', me heartie!"
STORAGE_ERROR: Final[str] = "Blunder! The ship's log could not be read or written."
SAVE_FAILED: Final[str] = (
    "Beware, captain! I couldn't write this to the ship's log.\n"
    "Yer change lives only in me memory until the next successful save."
)
INTERNAL_ERROR: Final[str] = "Blunder! Somethin' broke below deck. Try again, captain."


def index_out_of_range(index: int, count: int) -> str:
    if count == 0:
        return f"Blunder! There be no task #{index}, the log be empty, me heartie!"
    return (
        f"Blunder! There be no task #{index}. "
        f"Pick a number from 1 to {count}, me heartie!"
    )


# ---- command replies ----


def _numbered(lines: Sequence[str]) -> str:
    return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))


def task_list(lines: Sequence[str]) -> str:
    if not lines:
        return "Yer log be empty, captain. Not a single task aboard!"
    return "Here be the tasks in yer log:\n" + _numbered(lines)


def task_added(task: str, count: int) -> str:
    return (
        "Aye aye! I've hauled this task aboard:\n"
        f"  {task}\n"
        f"Now ye have {count} {_plural(count)} in the log."
    )


def task_marked(task: str) -> str:
    return f"Shiver me timbers! This task be done:\n  {task}"


def task_unmarked(task: str) -> str:
    return f"Arr, back to the oars! This task be not done yet:\n  {task}"


def task_deleted(task: str, count: int) -> str:
    return (
        "As ye command, this one has walked the plank:\n"
        f"{task}\n"
        f"Only {count} {_plural(count)} remain, captain!"
    )


def find_results(lines: Sequence[str]) -> str:
    if not lines:
        return "I scoured the seven seas, but found no matchin' tasks, captain."
    return "Here be the matchin' tasks in yer log:\n" + _numbered(lines)


def _plural(count: int) -> str:
    return "task" if count == 1 else "tasks"


HELP_TEXT: Final[str] = "\n".join(
    [
        "Orders I understand:",
        "  list                                   - show every task",
        "  todo <desc>                            - add a todo",
        "  deadline <desc> /by <dd/MM/yyyy HHmm>  - add a deadline",
        "  event <desc> /from <date> /to <date>   - add an event",
        "  mark <n> | unmark <n>                  - set task n done / not done",
        "  delete <n>                             - remove task n",
        "  find <word>                            - search descriptions (case-sensitive)",
        "  bye                                    - end the voyage",
    ]
)
