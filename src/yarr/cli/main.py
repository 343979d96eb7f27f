# src/yarr/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the saved task list), then runs
the console REPL in the main thread until the user says "bye".
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    if state.unpersisted:
        logger.warning("Exiting with unsaved changes; last save to %s failed.", state.settings.tasks_db_path)
    close = getattr(state.task_store, "close", None)
    if close is not None:
        close()


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
