"""
Unit tests for the polling scheduler.
"""

import time

import pytest

from market_pulse.scheduler import PollingScheduler


INTERVAL = 0.02


class TestPollingScheduler:
    """Test PollingScheduler class."""

    def test_runs_immediately_then_every_interval(self):
        calls = []
        sleeps = []

        def sleep(seconds):
            sleeps.append(seconds)
            time.sleep(seconds)

        scheduler = PollingScheduler(lambda: calls.append(time.monotonic()), INTERVAL, sleep=sleep)
        started = time.monotonic()

        executed = scheduler.run(max_ticks=3)

        assert executed == 3
        assert len(calls) == 3
        # First tick happens before any waiting
        assert calls[0] - started < INTERVAL
        assert calls[2] - calls[0] >= 2 * INTERVAL * 0.9
        assert sleeps
        assert all(0 < seconds <= INTERVAL for seconds in sleeps)

    def test_single_tick_does_not_sleep(self):
        sleeps = []
        scheduler = PollingScheduler(lambda: None, 30, sleep=sleeps.append)

        assert scheduler.run(max_ticks=1) == 1
        assert sleeps == []

    def test_waits_for_the_interval_before_next_tick(self):
        def sleep(seconds):
            assert 25 < seconds <= 30
            raise KeyboardInterrupt

        scheduler = PollingScheduler(lambda: None, 30, sleep=sleep)

        assert scheduler.run(max_ticks=2) == 1

    def test_stop_from_task(self):
        scheduler = None
        calls = []

        def task():
            calls.append(1)
            if len(calls) == 2:
                scheduler.stop()

        scheduler = PollingScheduler(task, INTERVAL)

        assert scheduler.run() == 2
        assert not scheduler.running

    def test_keyboard_interrupt_stops_cleanly(self):
        def sleep(_):
            raise KeyboardInterrupt

        scheduler = PollingScheduler(lambda: None, 1, sleep=sleep)

        assert scheduler.run() == 1
        assert not scheduler.running

    def test_tick_counter_accumulates(self):
        scheduler = PollingScheduler(lambda: None, INTERVAL)

        scheduler.run(max_ticks=2)
        scheduler.run(max_ticks=3)

        assert scheduler.ticks == 5

    def test_task_errors_propagate(self):
        def task():
            raise RuntimeError("boom")

        scheduler = PollingScheduler(task, INTERVAL)

        with pytest.raises(RuntimeError):
            scheduler.run()
        assert not scheduler.running

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            PollingScheduler(lambda: None, 0)
