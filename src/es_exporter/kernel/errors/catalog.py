"""Catalog errors – mapping-logic and registration bugs.

These are programming errors: they must surface at startup (registration) or
abort the current cycle (writes), never be swallowed.
"""

from __future__ import annotations

from typing import Any, Sequence

from es_exporter.kernel.errors.base import BaseError


class CatalogError(BaseError):
    """A metric catalog operation was used incorrectly."""

    default_code = "catalog_error"


class MetricRedefinitionError(CatalogError):
    """A known metric name was registered again with another signature."""

    default_code = "metric_redefinition"

    def __init__(
        self,
        name: str,
        *,
        existing: str,
        requested: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Metric '{name}' already registered as {existing}, got {requested}",
            detail={"metric": name, "existing": existing, "requested": requested},
            **kwargs,
        )
        self.name = name


class UnknownMetricError(CatalogError):
    """A write targeted a metric name that was never registered."""

    default_code = "unknown_metric"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Metric '{name}' is not registered",
            detail={"metric": name},
            **kwargs,
        )
        self.name = name


class LabelArityError(CatalogError):
    """The number of label values does not match the descriptor."""

    default_code = "label_arity"

    def __init__(
        self,
        name: str,
        label_names: Sequence[str],
        label_values: Sequence[str],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Metric '{name}' expects {len(label_names)} label value(s) "
            f"{tuple(label_names)!r}, got {len(label_values)}",
            detail={
                "metric": name,
                "expected": list(label_names),
                "received": [str(v) for v in label_values],
            },
            **kwargs,
        )
        self.name = name
        self.expected = len(label_names)
        self.received = len(label_values)


class MetricKindError(CatalogError):
    """A gauge operation targeted a timer, or the other way round."""

    default_code = "metric_kind"

    def __init__(self, name: str, *, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            f"Metric '{name}' is a {actual}, not a {expected}",
            detail={"metric": name, "expected": expected, "actual": actual},
            **kwargs,
        )
        self.name = name


class TimerAlreadyObservedError(CatalogError):
    """A timer handle was completed more than once."""

    default_code = "timer_already_observed"


__all__ = [
    "CatalogError",
    "LabelArityError",
    "MetricKindError",
    "MetricRedefinitionError",
    "TimerAlreadyObservedError",
    "UnknownMetricError",
]
