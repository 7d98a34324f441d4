# src/daylist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (auth client, session, notifier),
- picks the start screen from the stored session.
"""

from __future__ import annotations

import logging

from ..auth.client import AuthClient
from ..auth.session import SessionStore
from ..config import get_settings
from ..core.notify import ConsoleNotifier
from ..core.state import AppState, Route

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.session_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    session = SessionStore(settings.session_path)
    state = AppState(
        settings=settings,
        auth=AuthClient.from_settings(settings),
        session=session,
        notifier=ConsoleNotifier(),
    )

    if session.load() is not None:
        state.route = Route.HOME
        logger.info("Existing session found, opening the task list.")
    else:
        state.route = Route.LOGIN
    return state
