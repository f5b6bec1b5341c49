"""One-second tick source for the session loop."""

import time
from collections.abc import Callable


class SessionClock:
    """
    Repeating tick source polled by the event loop.

    The clock never sleeps or spawns threads. The loop asks how many ticks
    are due and how long it may wait for input before the next one.
    """

    def __init__(
        self,
        interval: float = 1.0,
        time_source: Callable[[], float] = time.monotonic,
    ):
        self.interval = interval
        self._time = time_source
        self._next_tick: float | None = None

    @property
    def running(self) -> bool:
        return self._next_tick is not None

    def start(self) -> None:
        """Start ticking; the first tick is due one interval from now."""
        self._next_tick = self._time() + self.interval

    def stop(self) -> None:
        self._next_tick = None

    def due_ticks(self) -> int:
        """Return how many ticks elapsed since the last call (0 when stopped)."""
        if self._next_tick is None:
            return 0

        now = self._time()
        count = 0
        # Catch up if the loop fell behind, keeping ticks in order
        while now >= self._next_tick:
            count += 1
            self._next_tick += self.interval
        return count

    def seconds_until_next_tick(self) -> float:
        """Time the loop may block waiting for input."""
        if self._next_tick is None:
            return 0.0
        return max(0.0, self._next_tick - self._time())
