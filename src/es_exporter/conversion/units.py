"""Conversion – raw Elasticsearch counters to canonical catalog units.

Durations become seconds (never rounded, except :func:`nanos_to_whole_seconds`
which truncates on purpose), booleans become 0/1, byte counts, raw counters
and percentages pass through. ``None`` in means ``None`` out, so callers can
skip writes for missing fields.
"""
from __future__ import annotations

from typing import Any

_NANOS_PER_SECOND = 1_000_000_000

_CLUSTER_STATUS = {"green": 0, "yellow": 1, "red": 2}


def millis_to_seconds(millis: float | None) -> float | None:
    if millis is None:
        return None
    return millis / 1000.0


def nanos_to_seconds(nanos: float | None) -> float | None:
    if nanos is None:
        return None
    return nanos / 1e9


def nanos_to_whole_seconds(nanos: int | None) -> int:
    """Truncate *nanos* toward zero to whole seconds; ``None`` counts as 0."""
    if not nanos:
        return 0
    seconds = abs(int(nanos)) // _NANOS_PER_SECOND
    return -seconds if nanos < 0 else seconds


def bool_to_gauge(flag: Any) -> int | None:
    """Encode a flag as 0/1. Accepts the ``"true"``/``"false"`` strings the
    REST API uses for some fields (``spins``)."""
    if flag is None:
        return None
    if isinstance(flag, str):
        lowered = flag.strip().lower()
        if lowered in ("true", "1", "yes"):
            return 1
        if lowered in ("false", "0", "no"):
            return 0
        raise ValueError(f"Not a boolean flag: {flag!r}")
    return 1 if flag else 0


def passthrough(value: Any) -> Any:
    """Bytes, counters and percentages are exported as given."""
    return value


def cluster_status_value(status: str | None) -> int | None:
    """``green``/``yellow``/``red`` → ``0``/``1``/``2``."""
    if status is None:
        return None
    try:
        return _CLUSTER_STATUS[status.lower()]
    except KeyError:
        raise ValueError(f"Unknown cluster status: {status!r}") from None


__all__ = [
    "bool_to_gauge",
    "cluster_status_value",
    "millis_to_seconds",
    "nanos_to_seconds",
    "nanos_to_whole_seconds",
    "passthrough",
]
