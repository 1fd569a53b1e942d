"""Shared session clock and cooperative stop signal.

Both loops read the same Deadline and StopSignal. Neither is ever reset once
the session has started.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional


class Deadline:
    """A fixed time budget measured from construction.

    Args:
        duration_s: Length of the budget in seconds.
        clock: Monotonic time source. Injected by tests.
    """

    def __init__(self, duration_s: float, clock: Callable[[], float] = time.monotonic):
        self.duration_s = duration_s
        self._clock = clock
        self._start = clock()

    def elapsed(self) -> float:
        return self._clock() - self._start

    def remaining(self) -> float:
        return max(0.0, self.duration_s - self.elapsed())

    def expired(self) -> bool:
        return self.elapsed() >= self.duration_s


class StopSignal:
    """Set-once flag observed by both loops.

    Backed by ``threading.Event`` so that setting it happens-before any
    thread that later observes it, and so waiters wake immediately.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until set or timeout. Returns True if the signal is set."""
        return self._event.wait(timeout)
