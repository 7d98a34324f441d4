# src/daylist/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_day, submit_text
from ..clock import ClockRunner, start_clock_in_background
from ..core.state import AppState, Route

logger = logging.getLogger(__name__)

LOGIN_HINT = "Log in with /login <username> <password>, or create an account with /register."


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        else:
            print(line)
    except OSError:
        print(line)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _prompt(state: AppState) -> str:
    if state.route == Route.HOME:
        view = state.day_view
        label = "edit" if view.editing else view.short_date()
        return f"[{label}] > "
    return f"[{state.route.value}] > "


def _start_clock(state: AppState) -> ClockRunner | None:
    settings = state.settings
    if not bool(getattr(settings, "clock_enabled", True)):
        return None

    def on_tick(text: str) -> None:
        state.clock_text = text

    return start_clock_in_background(
        on_tick,
        interval_seconds=float(getattr(settings, "clock_interval_seconds", 1.0)),
    )


def _handle_line(state: AppState, user_input: str) -> str | None:
    def emit(text: str) -> None:
        # Immediate feedback while a request is in flight.
        print(f"[{_ts_local()}] {text}", flush=True)

    cmd_response = command_registry.handle(state, user_input, emit=emit)
    if cmd_response is not None:
        return cmd_response

    # Plain text on the task screen behaves like typing into the input and pressing Enter.
    if state.route == Route.HOME:
        return submit_text(state, user_input)
    return LOGIN_HINT


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (screen=%s).", state.route.value)
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    clock = _start_clock(state)
    try:
        if state.route == Route.HOME:
            print(render_day(state))
        else:
            print(LOGIN_HINT)

        while True:
            try:
                user_input = input(_prompt(state)).strip()
                _rewrite_prev_line(f"[{_ts_local()}] > {user_input}")
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
                reply = _handle_line(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply:
                print(reply)
    finally:
        if clock is not None:
            clock.stop()
            clock.join(timeout=2.0)

    logger.info("Console connector finished.")
