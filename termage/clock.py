"""Fixed-rate tick clock."""

import time
from typing import Callable

_NS = 1_000_000_000


class Clock:
    """Measures time between ticks and paces the loop to a fixed tick length."""

    def __init__(self, tick_duration: float = 0.05, *,
                 now: Callable[[], int] = time.monotonic_ns,
                 sleep: Callable[[float], None] = time.sleep) -> None:
        self.tick_duration = tick_duration
        self._now = now
        self._sleep = sleep
        self._last_tick_ns = now()

    def tick(self) -> float:
        """Start a new tick and return the seconds since the previous one."""
        now = self._now()
        elapsed = (now - self._last_tick_ns) / _NS
        self._last_tick_ns = now
        return elapsed

    def sleep_until_next_tick(self) -> None:
        remaining = self._last_tick_ns + round(self.tick_duration * _NS) - self._now()
        if remaining > 0:
            self._sleep(remaining / _NS)

    def reset(self) -> None:
        self._last_tick_ns = self._now()