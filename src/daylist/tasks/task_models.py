# src/daylist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TaskOutcome(StrEnum):
    """
    Result of a task-list command.

    Invalid input never raises: the command is a no-op and the outcome says why.
    """

    OK = "ok"
    EMPTY_TEXT = "empty_text"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class Task:
    id: int
    text: str
    date: date
    created_at: str
    updated_at: str
    completed: bool = False


@dataclass(slots=True, frozen=True)
class TaskResult:
    outcome: TaskOutcome
    task: Task | None = None
    removed: int = 0

    @property
    def ok(self) -> bool:
        return self.outcome == TaskOutcome.OK


def as_day(value: date | datetime) -> date:
    """Drop the time-of-day part; tasks only care about the calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def same_day(a: date | datetime, b: date | datetime) -> bool:
    return as_day(a) == as_day(b)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)
