"""Background database reconnection monitor with exponential backoff."""

import logging
import threading
import time
from collections.abc import Callable

from django.db import connection
from django.db.utils import OperationalError

logger = logging.getLogger(__name__)

MAX_BACKOFF_SECONDS = 300
MAX_BACKOFF_MULTIPLIER = 10


class DatabaseMonitor:
    """Polls the database while it is unreachable.

    Started by the health service when a readiness check fails and stops on
    its own once a connection succeeds. After max_consecutive_failures the
    polling interval doubles on every failure, up to MAX_BACKOFF_SECONDS.
    """

    def __init__(
        self,
        check_interval_seconds: int = 30,
        max_consecutive_failures: int = 3,
    ) -> None:
        """Initialize the database monitor.

        Args:
            check_interval_seconds: Base interval between checks
            max_consecutive_failures: Failures before backoff starts
        """
        self.check_interval_seconds = check_interval_seconds
        self.max_consecutive_failures = max_consecutive_failures
        self._is_running = False
        self._monitor_thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._consecutive_failures = 0
        self._last_check_time: float | None = None
        self._on_recovery: Callable[[], None] | None = None

    def start_monitoring(self, on_recovery: Callable[[], None] | None = None) -> None:
        """Start the monitor thread unless it is already running.

        Args:
            on_recovery: Called from the monitor thread once the database
                         answers again
        """
        if self._is_running:
            return

        self._is_running = True
        self._on_recovery = on_recovery
        self._stop_event.clear()
        self._consecutive_failures = 0
        self._monitor_thread = threading.Thread(
            target=self._monitor_loop,
            name="DatabaseMonitor",
            daemon=True,
        )
        self._monitor_thread.start()
        logger.info("Database monitor started")

    def stop_monitoring(self) -> None:
        """Signal the monitor thread to stop and wait briefly for it."""
        if not self._is_running:
            return

        self._is_running = False
        self._stop_event.set()
        if self._monitor_thread is not None:
            self._monitor_thread.join(timeout=5.0)
            self._monitor_thread = None
        logger.info("Database monitor stopped")

    def _monitor_loop(self) -> None:
        while not self._stop_event.is_set():
            self._last_check_time = time.time()

            if self._check_database_connection():
                logger.info(
                    "Database reachable again after %d failed checks",
                    self._consecutive_failures,
                )
                self._consecutive_failures = 0
                self._is_running = False
                if self._on_recovery is not None:
                    self._on_recovery()
                break

            self._consecutive_failures += 1
            if self._consecutive_failures % 10 == 0:
                logger.warning(
                    "Database still unreachable after %d checks",
                    self._consecutive_failures,
                )

            self._stop_event.wait(timeout=self._calculate_backoff_interval())

    def _check_database_connection(self) -> bool:
        try:
            connection.ensure_connection()
        except OperationalError:
            return False
        return True

    def _calculate_backoff_interval(self) -> int:
        """Seconds until the next check, given the current failure count."""
        if self._consecutive_failures <= self.max_consecutive_failures:
            return self.check_interval_seconds

        multiplier = min(
            2 ** (self._consecutive_failures - self.max_consecutive_failures),
            MAX_BACKOFF_MULTIPLIER,
        )
        return int(min(self.check_interval_seconds * multiplier, MAX_BACKOFF_SECONDS))

    @property
    def is_monitoring(self) -> bool:
        """Whether the monitor thread is active."""
        return self._is_running

    @property
    def consecutive_failures(self) -> int:
        """Number of failed checks since monitoring started."""
        return self._consecutive_failures


# Global database monitor instance
database_monitor = DatabaseMonitor()
