"""
Pacing delay that the driver can cut short on shutdown.
"""

from __future__ import annotations

import threading


class CancellableDelay:
    """
    Sleeps that end early once cancel() has been called.

    After cancellation every further wait() returns immediately until
    reset() is called.
    """

    def __init__(self):
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def wait(self, seconds: float) -> bool:
        """Block for up to `seconds`. Returns True if the delay was cancelled."""
        if seconds <= 0:
            return self._cancelled.is_set()
        return self._cancelled.wait(seconds)

    def cancel(self) -> None:
        self._cancelled.set()

    def reset(self) -> None:
        self._cancelled.clear()
