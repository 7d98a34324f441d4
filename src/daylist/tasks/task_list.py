# src/daylist/tasks/task_list.py

"""
In-memory task list.

An ordered collection of tasks (insertion order) mutated by user commands.
Nothing is persisted: the list lives as long as the process does.

Ids come from a counter that only grows, so an id freed by delete is never
handed out again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from datetime import date, datetime

from .task_models import Task, TaskOutcome, TaskResult, as_day, format_timestamp, same_day

logger = logging.getLogger(__name__)


def filter_by_date(tasks: Iterable[Task], day: date | datetime) -> list[Task]:
    """Tasks that belong to `day`, in collection order. Never mutates `tasks`."""
    return [t for t in tasks if same_day(t.date, day)]


class TaskList:
    def __init__(self, *, now: Callable[[], datetime] | None = None) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._now = now or datetime.now

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def for_date(self, day: date | datetime) -> list[Task]:
        return filter_by_date(self._tasks, day)

    def _stamp(self) -> str:
        return format_timestamp(self._now())

    # ---- commands ----

    def add_task(self, text: str, day: date | datetime) -> TaskResult:
        clean = (text or "").strip()
        if not clean:
            return TaskResult(TaskOutcome.EMPTY_TEXT)

        stamp = self._stamp()
        task = Task(
            id=self._next_id,
            text=clean,
            date=as_day(day),
            created_at=stamp,
            updated_at=stamp,
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task %s added for %s", task.id, task.date.isoformat())
        return TaskResult(TaskOutcome.OK, task=task)

    def edit_task(self, task_id: int, new_text: str) -> TaskResult:
        task = self.get(task_id)
        if task is None:
            return TaskResult(TaskOutcome.NOT_FOUND)

        clean = (new_text or "").strip()
        if not clean:
            return TaskResult(TaskOutcome.EMPTY_TEXT, task=task)

        task.text = clean
        task.updated_at = self._stamp()
        logger.debug("Task %s edited", task_id)
        return TaskResult(TaskOutcome.OK, task=task)

    def delete_task(self, task_id: int) -> TaskResult:
        task = self.get(task_id)
        if task is None:
            return TaskResult(TaskOutcome.NOT_FOUND)

        self._tasks = [t for t in self._tasks if t.id != task_id]
        logger.debug("Task %s deleted", task_id)
        return TaskResult(TaskOutcome.OK, task=task, removed=1)

    def toggle_complete(self, task_id: int) -> TaskResult:
        task = self.get(task_id)
        if task is None:
            return TaskResult(TaskOutcome.NOT_FOUND)

        task.completed = not task.completed
        return TaskResult(TaskOutcome.OK, task=task)

    def clear_for_date(self, day: date | datetime) -> TaskResult:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not same_day(t.date, day)]
        removed = before - len(self._tasks)
        logger.debug("Cleared %d task(s) for %s", removed, as_day(day).isoformat())
        return TaskResult(TaskOutcome.OK, removed=removed)
