"""Periodic update scheduling."""

import threading
from collections.abc import Callable

from .logging_config import create_execution_logger


class FeedScheduler:
    """Calls ``callback`` every ``interval_minutes`` on a background thread.

    ``start`` replaces any running schedule, so it can be called again after
    the interval setting changes. An interval of 0 only stops.
    """

    def __init__(self, callback: Callable[[], object]):
        self.callback = callback
        self.logger = create_execution_logger("scheduler")
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, interval_minutes: float) -> None:
        self.stop()
        if interval_minutes <= 0:
            self.logger.info("Periodic updates disabled")
            return

        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._loop,
            args=(interval_minutes * 60, self._stop_event),
            name="localrss-scheduler",
            daemon=True,
        )
        self._thread.start()
        self.logger.info(
            "Periodic updates scheduled", interval_minutes=interval_minutes
        )

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop_event.set()
        if self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None

    def join(self, timeout: float | None = None) -> None:
        """Block until the schedule is stopped."""
        if self._thread is not None:
            self._thread.join(timeout)

    def _loop(self, interval_seconds: float, stop_event: threading.Event) -> None:
        while not stop_event.wait(interval_seconds):
            try:
                self.callback()
            except Exception as e:
                self.logger.error(
                    f"Scheduled update failed: {e}", exc_info=True, error=str(e)
                )
