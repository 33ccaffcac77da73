"""A pausable stopwatch measured in milliseconds."""

from __future__ import annotations

import time
from typing import Callable, Optional


def _now_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Stopwatch that can be started, stopped, paused and resumed.

    ``clock`` returns the current time in whole milliseconds; it defaults to
    a monotonic clock.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else _now_ms
        self._start_ticks = 0
        self._paused_ticks = 0
        self._started = False
        self._paused = False

    def start(self) -> None:
        """Start (or restart) timing from zero."""
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()
        self._paused_ticks = 0

    def stop(self) -> None:
        """Stop and reset the timer."""
        self._started = False
        self._paused = False
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        """Freeze the elapsed time; ignored unless running."""
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = self._clock() - self._start_ticks
            self._start_ticks = 0

    def unpause(self) -> None:
        """Resume after a pause; ignored unless paused."""
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = self._clock() - self._paused_ticks
            self._paused_ticks = 0

    def ticks(self) -> int:
        """Milliseconds elapsed while running, or 0 if not started."""
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return self._clock() - self._start_ticks

    def is_started(self) -> bool:
        return self._started

    def is_paused(self) -> bool:
        return self._paused and self._started