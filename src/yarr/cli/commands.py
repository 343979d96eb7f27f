# src/yarr/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import persona
from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Console slash-command registry (/help, /status, ...).

    Task orders ("todo ...", "list", ...) do not go through here; they are
    handled by core.session.handle_line.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a slash command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Slash command /%s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Console commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return f"{persona.HELP_TEXT}\n\n{registry.build_help()}"


def cmd_status(state: AppState, args: list[str]) -> str:
    total = state.tasks.count
    done = sum(1 for t in state.tasks if t.is_done)
    store_path = getattr(state.task_store, "path", None)
    saved = "NO (last save failed)" if state.unpersisted else "yes"
    return (
        "Status:\n"
        f"  Tasks: {total} ({done} done, {total - done} open)\n"
        f"  Storage: {store_path or 'n/a'}\n"
        f"  Saved to disk: {saved}"
    )


registry.register("help", cmd_help, help_text="Show available orders and commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts and storage state.")
