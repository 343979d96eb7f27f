# src/yarr/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core import persona
from ..core.session import handle_line
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, leave the echo alone.
    """
    if not sys.stdout.isatty():
        return
    sys.stdout.write("\033[1A\033[2K\r")
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


class ConsoleUi:
    """Ui port for the terminal: prints each reply, optionally timestamped."""

    def __init__(self, *, app_name: str = "yarr", timestamps: bool = True) -> None:
        self.app_name = app_name
        self.timestamps = timestamps

    def print_message(self, text: str) -> None:
        prefix = f"[{_ts_local()}] " if self.timestamps else ""
        print(f"{prefix}<<< {self.app_name}: {text}\n", flush=True)


def run_console_loop(state: AppState) -> None:
    settings = getattr(state, "settings", None)
    ui = ConsoleUi(
        app_name=str(getattr(settings, "app_name", "yarr")),
        timestamps=bool(getattr(settings, "console_timestamps", True)),
    )

    logger.info("Console connector started (tasks=%d).", state.tasks.count)
    ui.print_message(persona.GREETING_LOAD_FAILED if state.load_failed else persona.GREETING)
    print("Type your orders. Use /help for commands. Use 'bye' or /exit to quit.\n")

    while state.running:
        try:
            user_input = input(">>> You: ").strip()
            if ui.timestamps:
                _rewrite_prev_line(f"[{_ts_local()}] >>> You: {user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, user_input)
            if cmd_response is not None:
                ui.print_message(cmd_response)
                continue

            handle_line(state, user_input, ui)
        except Exception:
            logger.exception("Command handler crashed.")
            ui.print_message(persona.INTERNAL_ERROR)

    logger.info("Console connector finished.")
