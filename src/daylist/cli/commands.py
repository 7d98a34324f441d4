# src/daylist/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import cast

from ..auth.client import AuthError
from ..auth.validation import DEFAULT_MIN_PASSWORD_LENGTH, validate_login, validate_registration
from ..core.notify import Notification, NotificationLevel
from ..core.state import AppState, Route
from ..tasks.task_models import Task, TaskOutcome

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

LOGIN_REQUIRED = "Please log in first: /login <username> <password>"


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
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

        # A pending "/clear" prompt only survives until the next command.
        if name != "clear":
            state.confirm_clear = False

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _notify(state: AppState, level: NotificationLevel, title: str, description: str = "") -> None:
    state.notifier.notify(Notification(level=level, title=title, description=description))


def _emit(emit: CommandEmitter | None, text: str) -> None:
    if emit:
        with contextlib.suppress(Exception):
            emit(text)


def _require_home(state: AppState) -> str | None:
    if state.route == Route.HOME and state.logged_in:
        return None
    if state.route == Route.HOME:
        # Token vanished (e.g. session file removed): back to the login form.
        state.route = Route.LOGIN
    return LOGIN_REQUIRED


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    raw = args[0].lstrip("#")
    try:
        return int(raw)
    except ValueError:
        return None


def parse_day(raw: str) -> date | None:
    for fmt in ("%Y-%m-%d", "%d/%m/%Y"):
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def render_task(index: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    return (
        f"#{index} [{mark}] {task.text} (id={task.id})\n"
        f"     Created: {task.created_at} | Edited: {task.updated_at}"
    )


def render_day(state: AppState) -> str:
    view = state.day_view
    heading = f"Selected date: {view.heading()}"
    if view.is_today():
        heading += " (today)"
    lines = [heading]
    if state.clock_text:
        lines.append(f"Now: {state.clock_text}")

    tasks = view.visible()
    if not tasks:
        lines.append("No tasks for this day.")
    for i, task in enumerate(tasks, start=1):
        lines.append(render_task(i, task))

    if view.editing:
        lines.append(f"Editing task id={view.editing_id}. Type the new text, or /cancel.")
    return "\n".join(lines)


def submit_text(state: AppState, text: str) -> str:
    """Add a task to the selected day, or save the task being edited."""
    state.confirm_clear = False
    denied = _require_home(state)
    if denied:
        return denied

    view = state.day_view
    was_editing = view.editing
    result = view.submit(text)

    if result.outcome == TaskOutcome.EMPTY_TEXT:
        return "Task text cannot be empty."
    if result.outcome == TaskOutcome.NOT_FOUND:
        return "That task no longer exists."

    if was_editing:
        _notify(state, NotificationLevel.SUCCESS, "Task updated!")
    else:
        _notify(state, NotificationLevel.SUCCESS, "Task added!")
    return render_day(state)


# ---- auth ----


def cmd_login(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /login <username> <password>
    """
    username = args[0] if args else ""
    password = args[1] if len(args) > 1 else ""

    # A failed attempt while signed in keeps the task screen.
    if not state.logged_in:
        state.route = Route.LOGIN

    error = validate_login(username, password)
    if error:
        _notify(state, NotificationLevel.ERROR, "Login failed!", error)
        return "Usage: /login <username> <password>"

    _emit(emit, "Signing in...")
    try:
        token = state.auth.login(username, password)
    except AuthError as e:
        _notify(state, NotificationLevel.ERROR, "Login failed!", e.message)
        return ""

    state.session.save(token)
    state.route = Route.HOME
    _notify(state, NotificationLevel.SUCCESS, "Login successful!", "You are now signed in.")
    return render_day(state)


def cmd_register(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /register <username> <password> <confirm>
    """
    state.route = Route.REGISTER
    if not args:
        return "Usage: /register <username> <password> <confirm password>"

    username = args[0]
    password = args[1] if len(args) > 1 else ""
    confirm = args[2] if len(args) > 2 else ""
    min_length = int(getattr(state.settings, "min_password_length", DEFAULT_MIN_PASSWORD_LENGTH))

    error = validate_registration(username, password, confirm, min_length=min_length)
    if error:
        return error

    _emit(emit, "Creating account...")
    try:
        state.auth.register(username, password)
    except AuthError as e:
        return e.message

    state.route = Route.LOGIN
    _notify(
        state,
        NotificationLevel.SUCCESS,
        "Registration successful!",
        "Your account has been created, please log in.",
    )
    return "Log in with: /login <username> <password>"


def cmd_logout(state: AppState, args: list[str]) -> str:
    state.session.clear()
    state.route = Route.LOGIN
    state.day_view.cancel_edit()
    state.confirm_clear = False
    return "Logged out. Log in with: /login <username> <password>"


# ---- tasks ----


def cmd_add(state: AppState, args: list[str]) -> str:
    return submit_text(state, " ".join(args))


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id>         -> start editing (next plain text line saves)
    /edit <id> <text>  -> replace the text right away
    """
    denied = _require_home(state)
    if denied:
        return denied

    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id> [new text]"

    view = state.day_view
    current = view.begin_edit(task_id)
    if current is None:
        return f"No task with id={task_id}."

    if len(args) > 1:
        return submit_text(state, " ".join(args[1:]))
    return f"Editing task id={task_id}: {current}\nType the new text, or /cancel."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    view = state.day_view
    state.confirm_clear = False
    if not view.editing:
        return "Nothing to cancel."
    view.cancel_edit()
    return "Edit cancelled."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    denied = _require_home(state)
    if denied:
        return denied

    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"

    result = state.task_list.toggle_complete(task_id)
    if not result.ok or result.task is None:
        return f"No task with id={task_id}."
    status = "completed" if result.task.completed else "not completed"
    return f"Task id={task_id} marked {status}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    denied = _require_home(state)
    if denied:
        return denied

    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /del <id>"

    result = state.task_list.delete_task(task_id)
    if not result.ok:
        return f"No task with id={task_id}."

    if state.day_view.editing_id == task_id:
        state.day_view.cancel_edit()
    _notify(state, NotificationLevel.WARNING, "Task deleted!")
    return render_day(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    """
    /clear      -> ask for confirmation
    /clear yes  -> delete all tasks on the selected day
    /clear no   -> keep them
    """
    denied = _require_home(state)
    if denied:
        return denied

    view = state.day_view
    answer = args[0].lower() if args else ""

    if answer in ("no", "n"):
        state.confirm_clear = False
        return "Clear cancelled."

    if answer in ("yes", "y") and state.confirm_clear:
        state.confirm_clear = False
        result = view.clear_selected()
        _notify(
            state,
            NotificationLevel.ERROR,
            "All tasks deleted!",
            f"All tasks for {view.short_date()} have been deleted ({result.removed}).",
        )
        return render_day(state)

    state.confirm_clear = True
    return f"Delete all tasks for {view.short_date()}? Confirm with /clear yes (or /clear no)."


def cmd_day(state: AppState, args: list[str]) -> str:
    """
    /day prev | next | today | YYYY-MM-DD | DD/MM/YYYY
    """
    denied = _require_home(state)
    if denied:
        return denied

    view = state.day_view
    arg = args[0].lower() if args else "today"

    if arg in ("prev", "previous", "-", "<"):
        view.previous_day()
    elif arg in ("next", "+", ">"):
        view.next_day()
    elif arg == "today":
        view.select(None)
    else:
        day = parse_day(arg)
        if day is None:
            return "Usage: /day prev | next | today | YYYY-MM-DD | DD/MM/YYYY"
        view.select(day)

    state.confirm_clear = False
    return render_day(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    denied = _require_home(state)
    if denied:
        return denied
    return render_day(state)


# ---- misc ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_clock(state: AppState, args: list[str]) -> str:
    return state.clock_text or "Clock is not running."


def cmd_status(state: AppState, args: list[str]) -> str:
    view = state.day_view
    session = "active" if state.logged_in else "none"
    editing = f"id={view.editing_id}" if view.editing else "no"
    return (
        "Status:\n"
        f"  Screen: {state.route.value}\n"
        f"  Session: {session}\n"
        f"  Selected date: {view.heading()}\n"
        f"  Tasks: {len(view.visible())} on this day, {len(state.task_list)} total\n"
        f"  Editing: {editing}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show screen, session and task counts.")
registry.register("login", cmd_login, help_text="Log in: /login <username> <password>.")
registry.register(
    "register", cmd_register, help_text="Create an account: /register <username> <password> <confirm>."
)
registry.register("logout", cmd_logout, help_text="Log out and forget the session.")
registry.register(
    "add", cmd_add, help_text="Add a task to the selected day (plain text works too)."
)
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> [new text].")
registry.register("cancel", cmd_cancel, help_text="Leave edit mode.")
registry.register("done", cmd_toggle, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["delete", "rm"])
registry.register("clear", cmd_clear, help_text="Delete all tasks on the selected day (asks first).")
registry.register(
    "day", cmd_day, help_text="Change day: /day prev | next | today | YYYY-MM-DD | DD/MM/YYYY."
)
registry.register("list", cmd_list, help_text="Show tasks for the selected day.", aliases=["ls"])
registry.register("clock", cmd_clock, help_text="Show the current time.")
