# src/daylist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..tasks.day_view import DayView
from ..tasks.task_list import TaskList
from .ports import AuthClient, Notifier, SessionRepo


class Route(StrEnum):
    LOGIN = "login"
    REGISTER = "register"
    HOME = "home"


@dataclass
class AppState:
    # Settings object (or a SimpleNamespace in tests).
    settings: object

    auth: AuthClient
    session: SessionRepo
    notifier: Notifier

    task_list: TaskList = field(default_factory=TaskList)
    view: DayView | None = None
    route: Route = Route.LOGIN

    # Latest string rendered by the background clock.
    clock_text: str = ""
    # Set by "/clear", consumed by "/clear yes".
    confirm_clear: bool = False

    def __post_init__(self) -> None:
        if self.view is None:
            self.view = DayView(self.task_list)

    @property
    def day_view(self) -> DayView:
        assert self.view is not None
        return self.view

    @property
    def logged_in(self) -> bool:
        return self.session.load() is not None
