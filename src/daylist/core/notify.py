# src/daylist/core/notify.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class NotificationLevel(StrEnum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class Notification:
    level: NotificationLevel
    title: str
    description: str = ""

    def render(self) -> str:
        head = f"[{self.level.value.upper()}] {self.title}"
        return f"{head}: {self.description}" if self.description else head


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleNotifier:
    """Prints notifications the way a toast would show them, one line each."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def notify(self, notification: Notification) -> None:
        self._write(f"[{_ts_local()}] {notification.render()}")
