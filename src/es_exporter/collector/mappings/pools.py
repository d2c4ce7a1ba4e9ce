"""Mappings – name-keyed node sections: circuit breakers and thread pools."""
from __future__ import annotations

from es_exporter.catalog import MetricCatalog
from es_exporter.collector.mappings.base import GaugeSpec, SectionMapping, set_if_present
from es_exporter.collector.snapshot import Section, lookup, named_entries

_THREAD_POOL_LABELS = ("node", "name", "type")

# (metric, field, type label)
_THREAD_POOL_FIELDS = (
    ("threadpool_threads_number", "threads", "threads"),
    ("threadpool_threads_number", "active", "active"),
    ("threadpool_threads_number", "largest", "largest"),
    ("threadpool_threads_count", "completed", "completed"),
    ("threadpool_threads_count", "rejected", "rejected"),
    ("threadpool_tasks_number", "queue", "queue"),
)


class CircuitBreakerMapping(SectionMapping):
    name = "breakers"

    gauges = (
        GaugeSpec("circuitbreaker_estimated_bytes", "Circuit breaker estimated size", ("node", "name")),
        GaugeSpec("circuitbreaker_limit_bytes", "Circuit breaker size limit", ("node", "name")),
        GaugeSpec("circuitbreaker_overhead_ratio", "Circuit breaker overhead ratio", ("node", "name")),
        GaugeSpec("circuitbreaker_tripped_count", "Circuit breaker tripped count", ("node", "name")),
    )

    def update(self, catalog: MetricCatalog, node: str, data: Section) -> None:
        for breaker, stats in named_entries(data, ""):
            set_if_present(
                catalog, "circuitbreaker_estimated_bytes", lookup(stats, "estimated_size_in_bytes"), node, breaker
            )
            set_if_present(catalog, "circuitbreaker_limit_bytes", lookup(stats, "limit_size_in_bytes"), node, breaker)
            set_if_present(catalog, "circuitbreaker_overhead_ratio", lookup(stats, "overhead"), node, breaker)
            set_if_present(catalog, "circuitbreaker_tripped_count", lookup(stats, "tripped"), node, breaker)


class ThreadPoolMapping(SectionMapping):
    name = "thread_pool"

    gauges = (
        GaugeSpec("threadpool_threads_number", "Number of threads in thread pool", _THREAD_POOL_LABELS),
        GaugeSpec("threadpool_threads_count", "Count of threads in thread pool", _THREAD_POOL_LABELS),
        GaugeSpec("threadpool_tasks_number", "Number of tasks in thread pool", _THREAD_POOL_LABELS),
    )

    def update(self, catalog: MetricCatalog, node: str, data: Section) -> None:
        for pool, stats in named_entries(data, ""):
            for metric, key, kind in _THREAD_POOL_FIELDS:
                set_if_present(catalog, metric, lookup(stats, key), node, pool, kind)


__all__ = ["CircuitBreakerMapping", "ThreadPoolMapping"]
