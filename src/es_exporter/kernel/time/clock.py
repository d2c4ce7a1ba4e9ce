"""Kernel time – monotonic Clock protocol + implementations."""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Port: monotonic clock used to measure elapsed seconds."""

    def monotonic(self) -> float: ...


class SystemClock:
    """Production clock that delegates to :func:`time.perf_counter`."""

    def monotonic(self) -> float:
        return time.perf_counter()


class ManualClock:
    """Test clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def monotonic(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward by *seconds*."""
        if seconds < 0:
            raise ValueError("ManualClock cannot go backwards")
        self._now += seconds


__all__ = ["Clock", "ManualClock", "SystemClock"]
