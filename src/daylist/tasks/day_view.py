# src/daylist/tasks/day_view.py

"""
Day view over a TaskList.

Tracks which calendar day is selected and whether a task is being edited.
The visible tasks are derived from the list on every call; nothing is cached.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta

from .task_list import TaskList, filter_by_date
from .task_models import Task, TaskOutcome, TaskResult, as_day, same_day

HEADING_FORMAT = "%A, %d %B %Y"
SHORT_DATE_FORMAT = "%d/%m/%Y"


class DayView:
    def __init__(self, task_list: TaskList, *, today: Callable[[], date] | None = None) -> None:
        self.task_list = task_list
        self._today = today or date.today
        self.selected: date = self._today()
        self.editing_id: int | None = None

    # ---- date navigation ----

    def previous_day(self) -> date:
        self.selected = self.selected - timedelta(days=1)
        return self.selected

    def next_day(self) -> date:
        self.selected = self.selected + timedelta(days=1)
        return self.selected

    def select(self, day: date | datetime | None) -> date:
        """Select a day; a cleared picker (None) falls back to today."""
        self.selected = as_day(day) if day is not None else self._today()
        return self.selected

    def is_today(self, day: date | datetime | None = None) -> bool:
        return same_day(self.selected if day is None else day, self._today())

    def heading(self) -> str:
        return self.selected.strftime(HEADING_FORMAT)

    def short_date(self) -> str:
        return self.selected.strftime(SHORT_DATE_FORMAT)

    def visible(self) -> list[Task]:
        return filter_by_date(self.task_list.tasks, self.selected)

    # ---- edit mode ----

    @property
    def editing(self) -> bool:
        return self.editing_id is not None

    def begin_edit(self, task_id: int) -> str | None:
        """Enter edit mode; returns the current text to pre-fill the input, or None."""
        task = self.task_list.get(task_id)
        if task is None:
            return None
        self.editing_id = task.id
        return task.text

    def cancel_edit(self) -> None:
        self.editing_id = None

    def submit(self, text: str) -> TaskResult:
        """Save the edited task when editing, otherwise add a task to the selected day."""
        if self.editing_id is None:
            return self.task_list.add_task(text, self.selected)

        result = self.task_list.edit_task(self.editing_id, text)
        if result.outcome != TaskOutcome.EMPTY_TEXT:
            # Saved, or the task disappeared meanwhile: either way edit mode is over.
            self.editing_id = None
        return result

    def clear_selected(self) -> TaskResult:
        result = self.task_list.clear_for_date(self.selected)
        if self.editing_id is not None and self.task_list.get(self.editing_id) is None:
            self.editing_id = None
        return result
