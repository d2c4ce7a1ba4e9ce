"""Catalog – per-descriptor series storage.

Each descriptor owns one :class:`SeriesStore`: a mapping from the ordered
label-value tuple to an immutable value record. Records are replaced, never
mutated, under the store's lock, so a concurrent reader sees either the old
or the new record for a series and never a torn one.
"""
from __future__ import annotations

import dataclasses
import threading
from typing import Callable, Generic, TypeVar

LabelValues = tuple[str, ...]

R = TypeVar("R")


@dataclasses.dataclass(frozen=True)
class TimerStats:
    """Observation count and sum of seconds of one timer series."""

    count: int = 0
    sum: float = 0.0

    def observe(self, seconds: float) -> TimerStats:
        return TimerStats(count=self.count + 1, sum=self.sum + seconds)


class SeriesStore(Generic[R]):
    """Thread-safe label-tuple → record map for one descriptor."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._series: dict[LabelValues, R] = {}

    def put(self, labels: LabelValues, record: R) -> None:
        with self._lock:
            self._series[labels] = record

    def get(self, labels: LabelValues) -> R | None:
        with self._lock:
            return self._series.get(labels)

    def update(self, labels: LabelValues, default: R, fn: Callable[[R], R]) -> R:
        """Apply *fn* to the current record (or *default*) and store the result."""
        with self._lock:
            record = fn(self._series.get(labels, default))
            self._series[labels] = record
            return record

    def snapshot(self) -> list[tuple[LabelValues, R]]:
        """Copy of every series, in first-write order."""
        with self._lock:
            return list(self._series.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._series)


__all__ = ["LabelValues", "SeriesStore", "TimerStats"]
