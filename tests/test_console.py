# tests/test_console.py

from __future__ import annotations

import builtins
import threading
import time

import pytest

from daylist.cli.bootstrap import create_initial_state
from daylist.connectors.console_connector import run_console_loop
from daylist.core.state import Route


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_plain_text_adds_tasks_on_home(state, monkeypatch, capsys) -> None:
    state.session.save("tok")
    state.route = Route.HOME
    _feed(monkeypatch, ["Buy milk", "", "Walk dog", "/exit", "never reached"])

    run_console_loop(state)

    assert [t.text for t in state.task_list] == ["Buy milk", "Walk dog"]
    out = capsys.readouterr().out
    assert "#2 [ ] Walk dog (id=2)" in out


def test_plain_text_on_login_screen_only_hints(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["Buy milk"])

    run_console_loop(state)

    assert len(state.task_list) == 0
    assert "/login <username> <password>" in capsys.readouterr().out


def test_bootstrap_picks_start_screen_from_session(settings) -> None:
    fresh = create_initial_state(settings=settings)
    assert fresh.route == Route.LOGIN

    fresh.session.save("tok")
    resumed = create_initial_state(settings=settings)
    assert resumed.route == Route.HOME

    resumed.auth.close()
    fresh.auth.close()


def test_console_runs_clock_only_while_open(state, monkeypatch, capsys) -> None:
    state.settings.clock_enabled = True
    state.settings.clock_interval_seconds = 0.01
    lines = iter(["/clock", "/exit"])

    def fake_input(prompt: str = "") -> str:
        # Give the background clock a chance to tick before the first command.
        deadline = time.monotonic() + 2.0
        while not state.clock_text and time.monotonic() < deadline:
            time.sleep(0.01)
        return next(lines)

    monkeypatch.setattr(builtins, "input", fake_input)

    run_console_loop(state)

    assert state.clock_text
    assert "Clock is not running." not in capsys.readouterr().out
    assert not any(t.name == "daylist-clock" and t.is_alive() for t in threading.enumerate())
