"""Cancellable wait between poll ticks."""

import threading


class Timer:
    """Sleeps that can be cut short from another thread or a signal handler."""

    def __init__(self):
        self._cancelled = threading.Event()
        self._waiting = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def waiting(self) -> bool:
        """True while a ``sleep`` call is in progress."""
        return self._waiting

    def sleep(self, seconds: float) -> bool:
        """Wait ``seconds``. Returns False if the timer was cancelled."""
        self._waiting = True
        try:
            return not self._cancelled.wait(seconds)
        finally:
            self._waiting = False

    def cancel(self) -> None:
        self._cancelled.set()
