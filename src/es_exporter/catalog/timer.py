"""Catalog – TimerHandle, a scoped summary-timer observation."""
from __future__ import annotations

from types import TracebackType
from typing import Callable

from es_exporter.kernel.errors import TimerAlreadyObservedError
from es_exporter.kernel.time import Clock


class TimerHandle:
    """Measures wall time from creation until completion.

    Completion records exactly one observation, either explicitly through
    :meth:`observe_duration` or implicitly when the ``with`` block exits
    (normally or through an exception)::

        with catalog.start_summary_timer("metrics_generate_time_seconds", node):
            ...
    """

    def __init__(self, name: str, clock: Clock, record: Callable[[float], None]) -> None:
        self._name = name
        self._clock = clock
        self._record = record
        self._started = clock.monotonic()
        self._elapsed: float | None = None

    @property
    def observed(self) -> bool:
        return self._elapsed is not None

    @property
    def elapsed(self) -> float | None:
        """Recorded duration in seconds, ``None`` while still running."""
        return self._elapsed

    def observe_duration(self) -> float:
        """Record the elapsed seconds and return them."""
        if self._elapsed is not None:
            raise TimerAlreadyObservedError(
                f"Timer for '{self._name}' was already observed",
                detail={"metric": self._name, "elapsed": self._elapsed},
            )
        elapsed = max(0.0, self._clock.monotonic() - self._started)
        self._elapsed = elapsed
        self._record(elapsed)
        return elapsed

    def __enter__(self) -> TimerHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._elapsed is None:
            self.observe_duration()


__all__ = ["TimerHandle"]
