"""
Fixed-interval polling loop for refreshing prices.
"""

import logging
import time
from typing import Callable, Optional

import schedule


logger = logging.getLogger(__name__)


class PollingScheduler:
    """
    Runs a task once immediately and then every ``interval_seconds``.

    Ticks run sequentially on the calling thread. The next tick is scheduled
    from the end of the previous one, so ticks never overlap.
    """

    def __init__(
        self,
        task: Callable[[], object],
        interval_seconds: float,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("Interval must be positive")
        self.task = task
        self.interval_seconds = interval_seconds
        self._sleep = sleep or time.sleep
        self._scheduler = schedule.Scheduler()
        self._running = False
        self._max_ticks: Optional[int] = None
        self._executed = 0
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """Cancel the loop; the current tick (if any) completes first."""
        self._running = False

    def _tick(self):
        self.task()
        self._executed += 1
        self.ticks += 1

        if self._max_ticks is not None and self._executed >= self._max_ticks:
            self._running = False
        if not self._running:
            return schedule.CancelJob

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Run the polling loop until stopped or ``max_ticks`` ticks have run.

        Returns:
            Number of ticks executed by this call
        """
        self._running = True
        self._max_ticks = max_ticks
        self._executed = 0
        self._scheduler.clear()
        logger.info(f"Polling every {self.interval_seconds:g}s")

        try:
            self._tick()
            if self._running:
                self._scheduler.every(self.interval_seconds).seconds.do(self._tick)

            while self._running:
                idle = self._scheduler.idle_seconds
                if idle is None:
                    break
                if idle > 0:
                    self._sleep(idle)
                self._scheduler.run_pending()
        except KeyboardInterrupt:
            logger.info("Polling interrupted")
        finally:
            self._running = False
            self._scheduler.clear()

        return self._executed
