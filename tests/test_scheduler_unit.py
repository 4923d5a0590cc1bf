"""Unit tests for the periodic update scheduler."""

import threading
from unittest.mock import Mock

from localrss.scheduler import FeedScheduler


class TestFeedScheduler:
    """Tests for FeedScheduler."""

    def test_zero_interval_does_not_start(self):
        scheduler = FeedScheduler(Mock())
        scheduler.start(0)
        assert not scheduler.running

    def test_callback_runs_periodically(self):
        calls = threading.Semaphore(0)
        scheduler = FeedScheduler(calls.release)

        scheduler.start(0.001)  # 60 ms
        try:
            assert calls.acquire(timeout=5)
            assert calls.acquire(timeout=5)
        finally:
            scheduler.stop()

        assert not scheduler.running

    def test_restart_replaces_previous_schedule(self):
        scheduler = FeedScheduler(Mock())

        scheduler.start(10)
        first = scheduler._thread
        scheduler.start(20)

        assert scheduler.running
        assert scheduler._thread is not first
        assert not first.is_alive()
        scheduler.stop()

    def test_stop_is_idempotent(self):
        scheduler = FeedScheduler(Mock())
        scheduler.stop()
        scheduler.start(10)
        scheduler.stop()
        scheduler.stop()
        assert not scheduler.running

    def test_failing_callback_keeps_schedule(self):
        calls = threading.Semaphore(0)

        def callback():
            calls.release()
            raise RuntimeError("feed failure")

        scheduler = FeedScheduler(callback)
        scheduler.start(0.001)
        try:
            assert calls.acquire(timeout=5)
            assert calls.acquire(timeout=5)
            assert scheduler.running
        finally:
            scheduler.stop()
