# src/daily_planner/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..planner.planner_views import render_planner

logger = logging.getLogger(__name__)

PROMPT = ">>> "
EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, do nothing (the input is already visible).
    """
    if not sys.stdout.isatty():
        return
    sys.stdout.write("\033[1A\033[2K\r")
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read slash commands until /exit, EOF or Ctrl+C.

    Every reply to a mutating command already carries the re-rendered planner.
    The echoed input line is only repainted (timestamped) when both read_line
    and write are the real terminal defaults.
    """
    repaint_input = read_line is input and write is print
    app_name = str(getattr(state.settings, "app_name", "Daily Planner"))
    logger.info("Console connector started.")

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}")

    emit(f"[{app_name}] Use /help for commands. Use /exit to quit.")
    write(render_planner(state.store))

    while True:
        try:
            user_input = read_line(PROMPT).strip()
            if repaint_input:
                _rewrite_prev_line(f"[{_ts_local()}] {PROMPT}{user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed: %r", user_input)
            cmd_response = "Internal error while handling a command."

        if cmd_response is None:
            cmd_response = "Commands start with '/'. To add a task type: /add <title>. Use /help for more."

        emit(cmd_response)

    logger.info("Console connector finished.")
