# Area: Core Tests
"""Tests for ScheduledTask and the schedulers."""

import threading

from brainplay._core.scheduler import ManualScheduler, ScheduledTask, ThreadingScheduler


class TestScheduledTask:
    """Tests for a single delayed call."""

    def test_run_invokes_once(self):
        calls = []
        task = ScheduledTask(lambda: calls.append(1), 10)
        task.run()
        task.run()
        assert calls == [1]
        assert not task.pending

    def test_cancelled_task_never_runs(self):
        calls = []
        task = ScheduledTask(lambda: calls.append(1), 10)
        task.cancel()
        task.run()
        assert calls == []
        assert task.cancelled

    def test_cancel_after_run_is_noop(self):
        task = ScheduledTask(lambda: None, 10)
        task.run()
        task.cancel()
        assert not task.cancelled

    def test_callback_may_cancel_itself(self):
        """Test that cancelling from inside the callback does not deadlock."""
        holder = {}
        task = ScheduledTask(lambda: holder["task"].cancel(), 10)
        holder["task"] = task
        task.run()
        assert not task.pending


class TestManualScheduler:
    """Tests for the caller-driven scheduler."""

    def test_task_runs_only_when_due(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(800, lambda: calls.append("x"))
        assert scheduler.advance(799) == 0
        assert calls == []
        assert scheduler.advance(1) == 1
        assert calls == ["x"]

    def test_deadline_order_and_fifo(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(200, lambda: calls.append("late"))
        scheduler.call_later(100, lambda: calls.append("first"))
        scheduler.call_later(100, lambda: calls.append("second"))
        scheduler.advance(500)
        assert calls == ["first", "second", "late"]

    def test_cancelled_tasks_skipped(self):
        scheduler = ManualScheduler()
        task = scheduler.call_later(100, lambda: None)
        assert scheduler.pending_count == 1
        task.cancel()
        assert scheduler.pending_count == 0
        assert scheduler.advance(100) == 0

    def test_task_scheduled_by_task_runs_in_same_advance(self):
        scheduler = ManualScheduler()
        calls = []

        def first():
            calls.append("first")
            scheduler.call_later(100, lambda: calls.append("chained"))

        scheduler.call_later(100, first)
        scheduler.advance(300)
        assert calls == ["first", "chained"]

    def test_run_all(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(5000, lambda: calls.append(1))
        scheduler.call_later(10, lambda: calls.append(2))
        assert scheduler.run_all() == 2
        assert calls == [2, 1]
        assert scheduler.now_ms == 5000


class TestThreadingScheduler:
    """Tests for the timer-backed scheduler."""

    def test_runs_after_delay(self):
        fired = threading.Event()
        ThreadingScheduler().call_later(10, fired.set)
        assert fired.wait(2.0)

    def test_cancel_prevents_run(self):
        fired = threading.Event()
        task = ThreadingScheduler().call_later(200, fired.set)
        task.cancel()
        assert not fired.wait(0.5)


class TestOwnerLock:
    """Tests for tasks that run under their owner's lock."""

    def test_callback_holds_owner_lock(self):
        lock = threading.RLock()
        held = []

        def callback():
            other = []
            worker = threading.Thread(target=lambda: other.append(lock.acquire(blocking=False)))
            worker.start()
            worker.join()
            held.append(not other[0])

        ScheduledTask(callback, 0, lock).run()
        assert held == [True]

    def test_cancel_while_owner_busy_wins(self):
        """Test that a due task waits for the owner and then sees the cancel."""
        lock = threading.RLock()
        calls = []
        task = ThreadingScheduler().call_later(10, lambda: calls.append("ran"), lock=lock)
        with lock:
            threading.Event().wait(0.2)
            task.cancel()
        threading.Event().wait(0.2)
        assert calls == []
        assert task.cancelled

    def test_manual_scheduler_passes_lock(self):
        lock = threading.RLock()
        scheduler = ManualScheduler()
        held = []

        def callback():
            other = []
            worker = threading.Thread(target=lambda: other.append(lock.acquire(blocking=False)))
            worker.start()
            worker.join()
            held.append(not other[0])

        scheduler.call_later(50, callback, lock=lock)
        scheduler.advance(50)
        assert held == [True]
