"""A millisecond stopwatch used to pace animations."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures milliseconds elapsed since creation or the last reset."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self.start = clock()

    def ticks(self) -> float:
        """Milliseconds since the timer was started or reset."""
        return (self._clock() - self.start) * 1000.0

    def reset(self) -> None:
        """Start counting again from zero."""
        self.start = self._clock()