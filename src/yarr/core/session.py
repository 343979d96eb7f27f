# src/yarr/core/session.py

"""
Core request/response step.

Transport-agnostic: a front end passes one raw line in and shows the string
that comes back. Errors from parsing or executing are turned into replies
here; the session keeps running.
"""

from __future__ import annotations

import logging

from .commands import execute_command
from .errors import YarrError
from .parser import parse_command
from .ports import Ui
from .state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str, ui: Ui) -> str:
    """
    Parse and execute one line against the session.

    Returns the reply that was shown through `ui`. Only YarrError is handled;
    anything else is a bug and propagates to the caller.
    """
    try:
        command = parse_command(line)
        result = execute_command(command, state.tasks, state.task_store, ui)
    except YarrError as e:
        logger.debug("Command rejected (%s): %r", e.__class__.__name__, line)
        ui.print_message(e.message)
        return e.message

    if result.persisted is not None:
        state.unpersisted = not result.persisted
    if result.is_exit:
        state.running = False
        logger.info("Exit requested, session ending.")

    return result.message
