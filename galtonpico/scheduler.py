"""Cooperative tick-based task scheduler and a periodic timer thread."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass

MAX_TASKS = 12
_WRAP = 1 << 32


class SchedulerFullError(RuntimeError):
    """Raised when more tasks are created than the scheduler can hold."""


@dataclass
class _Task:
    id: int
    period: int
    last_activation: int
    callback: Callable[[], object]


class Scheduler:
    """Runs callbacks once their period in ticks has elapsed."""

    def __init__(self) -> None:
        self._timestamp = 0
        self._tasks: list[_Task] = []

    def tick(self) -> None:
        """Advance the time stamp by one tick."""
        self._timestamp = (self._timestamp + 1) % _WRAP

    def timestamp(self) -> int:
        """Return the current time stamp in ticks."""
        return self._timestamp

    def run(self) -> None:
        """Call every task whose period has elapsed, in creation order."""
        for task in self._tasks:
            if (self._timestamp - task.last_activation) % _WRAP >= task.period:
                task.callback()
                task.last_activation = self._timestamp

    def create_task(self, period: int, callback: Callable[[], object]) -> None:
        """Register ``callback`` to run every ``period`` ticks."""
        if len(self._tasks) >= MAX_TASKS:
            raise SchedulerFullError(f"at most {MAX_TASKS} tasks can be created")
        self._tasks.append(
            _Task(
                id=len(self._tasks),
                period=period % _WRAP,
                last_activation=self._timestamp,
                callback=callback,
            )
        )

    def __len__(self) -> int:
        return len(self._tasks)


class PeriodicTimer:
    """Calls ``callback`` every ``interval_ms`` milliseconds on a thread.

    The callback returns a true value to keep the timer going; a false
    value stops it.
    """

    def __init__(self, interval_ms: float, callback: Callable[[], bool]) -> None:
        if interval_ms < 0:
            raise ValueError("interval must not be negative")
        self.interval_ms = interval_ms
        self.callback = callback
        self._halt = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the timer thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("timer is already running")
        self._halt.clear()
        self._thread = threading.Thread(target=self._loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the timer and wait for its thread to finish."""
        self._halt.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _loop(self) -> None:
        interval = self.interval_ms / 1000
        while not self._halt.wait(interval):
            if not self.callback():
                break

    def __enter__(self) -> PeriodicTimer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()