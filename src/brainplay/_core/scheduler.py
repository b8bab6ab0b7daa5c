# Area: Core
"""
brainplay._core.scheduler — Cancellable delayed tasks
======================================================

The only timer an engine owns is the short card-flip resolution delay.
It is modelled as a ScheduledTask bound to the engine, so disposing the
engine cancels it and a cancelled task can never run.

Two schedulers are provided:

- ThreadingScheduler: real delays via ``threading.Timer`` (default).
- ManualScheduler: the caller advances time explicitly. Used by tests,
  replays and any host that already owns a frame loop.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Protocol

logger = logging.getLogger("brainplay.scheduler")


class ScheduledTask:
    """
    One pending delayed call.

    ``run`` and ``cancel`` are serialized by a lock: once ``cancel``
    returns, the callback has either already finished or will never run.
    The lock is re-entrant so a running callback may dispose its owner.
    Passing the owner's lock makes the callback run under it, so a task
    never interleaves with the owner's other work.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        delay_ms: float,
        lock: Optional[threading.RLock] = None,
    ):
        self.delay_ms = delay_ms
        self._callback = callback
        self._lock = lock if lock is not None else threading.RLock()
        self._cancelled = False
        self._done = False

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._done)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Cancel the task. No-op if it already ran."""
        with self._lock:
            if not self._done:
                self._cancelled = True

    def run(self) -> None:
        """Invoke the callback unless cancelled or already run."""
        with self._lock:
            if not self.pending:
                return
            self._done = True
            self._callback()


class Scheduler(Protocol):
    """Protocol for objects that can run a callback after a delay."""

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[[], None],
        lock: Optional[threading.RLock] = None,
    ) -> ScheduledTask:
        ...


class ThreadingScheduler:
    """Runs tasks on ``threading.Timer`` threads."""

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[[], None],
        lock: Optional[threading.RLock] = None,
    ) -> ScheduledTask:
        task = ScheduledTask(callback, delay_ms, lock)
        timer = threading.Timer(delay_ms / 1000.0, task.run)
        timer.daemon = True
        timer.start()
        logger.debug(f"Scheduled task in {delay_ms:.0f}ms")
        return task


class ManualScheduler:
    """
    Scheduler driven by explicit ``advance()`` calls.

    Tasks become due once the accumulated time reaches their deadline
    and run in deadline order, FIFO among equal deadlines.
    """

    def __init__(self) -> None:
        self.now_ms: float = 0.0
        self._queue: List[tuple] = []
        self._sequence = 0

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[[], None],
        lock: Optional[threading.RLock] = None,
    ) -> ScheduledTask:
        task = ScheduledTask(callback, delay_ms, lock)
        self._queue.append((self.now_ms + delay_ms, self._sequence, task))
        self._sequence += 1
        return task

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, task in self._queue if task.pending)

    def advance(self, ms: float) -> int:
        """
        Move time forward and run every task that became due.

        Returns:
            Number of tasks that actually ran
        """
        target = self.now_ms + ms
        ran = 0
        while True:
            due = [entry for entry in self._queue if entry[0] <= target]
            if not due:
                break
            entry = min(due, key=lambda e: (e[0], e[1]))
            self._queue.remove(entry)
            # the clock reads the task's own deadline while it runs
            self.now_ms = max(self.now_ms, entry[0])
            task = entry[2]
            if task.pending:
                task.run()
                ran += 1
        self.now_ms = target
        return ran

    def run_all(self) -> int:
        """Run everything that is pending, whatever its deadline."""
        ran = 0
        while self._queue:
            deadline = max(entry[0] for entry in self._queue)
            ran += self.advance(max(0.0, deadline - self.now_ms))
        return ran
