# src/yarr/core/commands.py

"""
Command values and their executor.

A Command is a small frozen value produced by the parser. It never holds a
reference to the task list: `execute_command` receives the list, the store
and the UI for the duration of one call and dispatches on the command type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from . import persona
from .errors import StorageError
from .ports import TaskRepo, Ui

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class ToggleMarkCommand:
    index: int
    done: bool


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class AddCommand:
    task: Task


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


Command = ExitCommand | ListCommand | ToggleMarkCommand | DeleteCommand | AddCommand | FindCommand


@dataclass(frozen=True, slots=True)
class CommandResult:
    message: str
    is_exit: bool = False
    # None: nothing to persist; True/False: outcome of the save.
    persisted: bool | None = None


def _persist(tasks: TaskList, storage: TaskRepo) -> bool:
    try:
        storage.save_tasks(tasks.snapshot())
    except StorageError:
        logger.exception("Saving %d tasks failed; in-memory list is ahead of disk.", tasks.count)
        return False
    return True


def _mutation_result(message: str, persisted: bool) -> CommandResult:
    if not persisted:
        message = f"{message}\n{persona.SAVE_FAILED}"
    return CommandResult(message=message, persisted=persisted)


def execute_command(command: Command, tasks: TaskList, storage: TaskRepo, ui: Ui) -> CommandResult:
    """
    Run one command against the session's task list.

    Mutating commands save the full list before replying. A failed save does
    not roll the mutation back; the reply carries a warning instead.
    Raises IndexOutOfRange for bad indices (nothing is mutated then).
    """
    result = _dispatch(command, tasks, storage)
    ui.print_message(result.message)
    return result


def _dispatch(command: Command, tasks: TaskList, storage: TaskRepo) -> CommandResult:
    match command:
        case ExitCommand():
            return CommandResult(message=persona.FAREWELL, is_exit=True)

        case ListCommand():
            return CommandResult(message=persona.task_list([str(t) for t in tasks]))

        case ToggleMarkCommand(index=index, done=done):
            task = tasks.get(index)
            task.mark(done)
            logger.debug("Task #%d marked done=%s", index, done)
            text = persona.task_marked(str(task)) if done else persona.task_unmarked(str(task))
            return _mutation_result(text, _persist(tasks, storage))

        case DeleteCommand(index=index):
            removed = tasks.display(index)
            tasks.remove_at(index)
            logger.debug("Task #%d deleted, %d remain", index, tasks.count)
            return _mutation_result(persona.task_deleted(removed, tasks.count), _persist(tasks, storage))

        case AddCommand(task=task):
            tasks.append(task)
            logger.debug("Task added kind=%s count=%d", task.kind, tasks.count)
            return _mutation_result(persona.task_added(str(task), tasks.count), _persist(tasks, storage))

        case FindCommand(keyword=keyword):
            matches = tasks.find(keyword)
            return CommandResult(message=persona.find_results([str(t) for t in matches]))

    raise TypeError(f"Unsupported command: {command!r}")
