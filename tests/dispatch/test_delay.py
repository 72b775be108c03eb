"""
Tests for four_wins.dispatch.delay
"""

import threading
import time

from four_wins.dispatch import CancellableDelay


class TestCancellableDelay:
    """CancellableDelay tests."""

    def test_wait_runs_out(self):
        delay = CancellableDelay()
        started = time.monotonic()
        assert delay.wait(0.05) is False
        assert time.monotonic() - started >= 0.04

    def test_zero_wait_returns_immediately(self):
        assert CancellableDelay().wait(0) is False

    def test_cancel_from_other_thread(self):
        """A pending wait ends early once another thread cancels."""
        delay = CancellableDelay()
        timer = threading.Timer(0.05, delay.cancel)
        timer.start()

        started = time.monotonic()
        assert delay.wait(10.0) is True
        assert time.monotonic() - started < 5.0
        timer.join()

    def test_cancelled_waits_return_at_once(self):
        delay = CancellableDelay()
        delay.cancel()
        assert delay.cancelled
        assert delay.wait(10.0) is True
        assert delay.wait(0) is True

    def test_reset(self):
        delay = CancellableDelay()
        delay.cancel()
        delay.reset()
        assert not delay.cancelled
        assert delay.wait(0.01) is False
