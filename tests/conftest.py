# tests/conftest.py

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from daylist.auth.session import SessionStore
from daylist.core.state import AppState
from daylist.tasks.day_view import DayView
from daylist.tasks.task_list import TaskList

from .fakes import FakeAuthClient, RecordingNotifier

TODAY = date(2024, 5, 1)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="daylist-test",
        api_base_url="http://auth.test",
        http_timeout_seconds=1.0,
        min_password_length=6,
        clock_enabled=False,
        clock_interval_seconds=1.0,
        data_dir=tmp_path,
        session_path=tmp_path / "session.json",
    )


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList(now=lambda: datetime(2024, 5, 1, 9, 30, 0))


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def auth() -> FakeAuthClient:
    return FakeAuthClient(users={"alice": "secret1"})


@pytest.fixture()
def state(settings: SimpleNamespace, task_list: TaskList, auth, notifier) -> AppState:
    """
    AppState wired with deterministic fakes, pinned to 2024-05-01.

    The session store is real (file under tmp_path): its behavior is part of what we test.
    """
    return AppState(
        settings=settings,
        auth=auth,
        session=SessionStore(settings.session_path),
        notifier=notifier,
        task_list=task_list,
        view=DayView(task_list, today=lambda: TODAY),
    )


@pytest.fixture()
def home_state(state: AppState) -> AppState:
    """State after a successful login."""
    from daylist.cli.commands import registry

    registry.handle(state, "/login alice secret1")
    return state
