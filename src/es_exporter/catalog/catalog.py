"""Catalog – MetricCatalog, the live labeled-series registry.

The catalog is the only long-lived state of the exporter. It is created once
at startup, receives every descriptor before the first collection cycle and
is then shared by the collection pipeline (writer) and the exposition path
(reader). Series are created on first write and overwritten in place; nothing
is ever removed.
"""
from __future__ import annotations

import threading
from typing import Any

from prometheus_client import CollectorRegistry

from es_exporter.catalog.descriptor import CLUSTER_LABEL, MetricDescriptor, MetricKind
from es_exporter.catalog.exposition import CatalogCollector, render
from es_exporter.catalog.series import LabelValues, SeriesStore, TimerStats
from es_exporter.catalog.timer import TimerHandle
from es_exporter.kernel.errors import (
    LabelArityError,
    MetricKindError,
    MetricRedefinitionError,
    UnknownMetricError,
)
from es_exporter.kernel.time import Clock, SystemClock


class _Entry:
    __slots__ = ("descriptor", "series")

    def __init__(self, descriptor: MetricDescriptor) -> None:
        self.descriptor = descriptor
        self.series: SeriesStore[Any] = SeriesStore()


class MetricCatalog:
    """Registry of metric descriptors and their current labeled values.

    Parameters
    ----------
    prefix:
        Prepended to every metric name at render time (``"es_"`` for the
        Elasticsearch exporter). Catalog operations always take the
        unprefixed name.
    cluster:
        When set, every rendered series carries a leading
        ``cluster="<cluster>"`` label. ``cluster`` is then a reserved label
        name for descriptors.
    clock:
        Monotonic clock used by timer handles.
    """

    def __init__(
        self,
        *,
        prefix: str = "",
        cluster: str | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._prefix = prefix
        self._cluster = cluster
        self._clock: Clock = clock or SystemClock()
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry] = {}
        self._registry = CollectorRegistry(auto_describe=False)
        self._registry.register(CatalogCollector(self))

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def cluster(self) -> str | None:
        return self._cluster

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_gauge(self, name: str, help: str, *label_names: str) -> MetricDescriptor:
        return self._register(MetricDescriptor(name, help, tuple(label_names), MetricKind.GAUGE))

    def register_summary_timer(self, name: str, help: str, *label_names: str) -> MetricDescriptor:
        return self._register(MetricDescriptor(name, help, tuple(label_names), MetricKind.TIMER))

    def _register(self, descriptor: MetricDescriptor) -> MetricDescriptor:
        if self._cluster is not None and CLUSTER_LABEL in descriptor.label_names:
            raise ValueError(
                f"Label '{CLUSTER_LABEL}' is reserved by the catalog (metric {descriptor.name!r})"
            )
        with self._lock:
            entry = self._entries.get(descriptor.name)
            if entry is None:
                self._entries[descriptor.name] = _Entry(descriptor)
                return descriptor
        if not entry.descriptor.same_signature(descriptor):
            raise MetricRedefinitionError(
                descriptor.name,
                existing=entry.descriptor.signature(),
                requested=descriptor.signature(),
            )
        return entry.descriptor

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_gauge(self, name: str, value: float, *label_values: Any) -> None:
        """Create or overwrite the gauge series ``name{label_values}``."""
        entry, labels = self._resolve(name, label_values, MetricKind.GAUGE)
        entry.series.put(labels, float(value))

    def start_summary_timer(self, name: str, *label_values: Any) -> TimerHandle:
        """Start timing one observation of the timer series ``name{label_values}``."""
        entry, labels = self._resolve(name, label_values, MetricKind.TIMER)

        def record(seconds: float) -> None:
            entry.series.update(labels, TimerStats(), lambda stats: stats.observe(seconds))

        return TimerHandle(name, self._clock, record)

    def _resolve(
        self,
        name: str,
        label_values: tuple[Any, ...],
        kind: MetricKind,
    ) -> tuple[_Entry, LabelValues]:
        with self._lock:
            entry = self._entries.get(name)
        if entry is None:
            raise UnknownMetricError(name)
        descriptor = entry.descriptor
        if descriptor.kind is not kind:
            raise MetricKindError(name, expected=kind.value, actual=descriptor.kind.value)
        if len(label_values) != descriptor.arity:
            raise LabelArityError(name, descriptor.label_names, label_values)
        return entry, tuple(str(v) for v in label_values)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def descriptors(self) -> list[MetricDescriptor]:
        """Registered descriptors in registration order."""
        with self._lock:
            return [e.descriptor for e in self._entries.values()]

    def descriptor(self, name: str) -> MetricDescriptor:
        with self._lock:
            entry = self._entries.get(name)
        if entry is None:
            raise UnknownMetricError(name)
        return entry.descriptor

    def value(self, name: str, *label_values: Any) -> float | None:
        """Current value of a gauge series, ``None`` if never written."""
        entry, labels = self._resolve(name, label_values, MetricKind.GAUGE)
        return entry.series.get(labels)

    def timer_stats(self, name: str, *label_values: Any) -> TimerStats | None:
        """Count/sum of a timer series, ``None`` if never observed."""
        entry, labels = self._resolve(name, label_values, MetricKind.TIMER)
        return entry.series.get(labels)

    def series(self, name: str) -> list[tuple[LabelValues, Any]]:
        """Every written series of *name* as ``(label_values, record)`` pairs."""
        with self._lock:
            entry = self._entries.get(name)
        if entry is None:
            raise UnknownMetricError(name)
        return entry.series.snapshot()

    @property
    def registry(self) -> CollectorRegistry:
        """Private ``prometheus_client`` registry exposing this catalog."""
        return self._registry

    def render(self) -> bytes:
        """Render the catalog in the Prometheus text exposition format."""
        return render(self._registry)


__all__ = ["CLUSTER_LABEL", "MetricCatalog"]
