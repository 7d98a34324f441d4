# src/daylist/clock.py

"""
Live clock for the day view.

A small polling loop that renders the current time every interval and hands
the string to a callback. It has no access to the task list.

The console REPL is blocking (input()), so the loop runs in a background
thread with its own event loop. It is started when the view opens and must be
stopped when the view is torn down.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger(__name__)

CLOCK_FORMAT = "%A, %d %B %Y %H:%M:%S"

TickHandler = Callable[[str], None]


def format_clock(now: datetime) -> str:
    return now.strftime(CLOCK_FORMAT)


async def run_clock(
    on_tick: TickHandler,
    *,
    interval_seconds: float = 1.0,
    now: Callable[[], datetime] = datetime.now,
) -> None:
    """
    Call on_tick(format_clock(now())) every interval_seconds.

    A failing callback is logged and the loop keeps going. Only the first
    failure of a streak gets a traceback; repeats go to DEBUG.
    To stop the clock, cancel the coroutine/task.
    """
    sleep_s = max(0.001, float(interval_seconds))
    failing = False

    while True:
        try:
            on_tick(format_clock(now()))
        except Exception:
            if failing:
                logger.debug("Clock tick handler still failing", exc_info=True)
            else:
                logger.exception("Clock tick handler failed")
            failing = True
        else:
            failing = False
        await asyncio.sleep(sleep_s)


@dataclass(slots=True)
class ClockRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    task: asyncio.Task

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.task.cancel)
        except RuntimeError:
            # Loop already closed: the thread has finished on its own.
            logger.debug("Clock loop already closed.")

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)

    @property
    def running(self) -> bool:
        return self.thread.is_alive()


def start_clock_in_background(
    on_tick: TickHandler,
    *,
    interval_seconds: float = 1.0,
    now: Callable[[], datetime] = datetime.now,
) -> ClockRunner | None:
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        task = loop.create_task(run_clock(on_tick, interval_seconds=interval_seconds, now=now))

        holder["loop"] = loop
        holder["task"] = task
        ready.set()

        try:
            with contextlib.suppress(asyncio.CancelledError):
                loop.run_until_complete(task)
        finally:
            loop.close()
            logger.debug("Clock thread finished.")

    t = threading.Thread(target=runner, name="daylist-clock", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    task = holder.get("task")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(task, asyncio.Task):
        logger.error("Clock thread did not initialize properly.")
        return None

    logger.info("Clock started (interval=%.1fs).", interval_seconds)
    return ClockRunner(thread=t, loop=loop, task=task)
