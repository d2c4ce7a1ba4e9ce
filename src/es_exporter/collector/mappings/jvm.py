"""Mappings – JVM statistics (heap, pools, threads, GC, buffer pools, classes)."""
from __future__ import annotations

from es_exporter.catalog import MetricCatalog
from es_exporter.collector.mappings.base import Field, GaugeSpec, SectionMapping, set_if_present
from es_exporter.collector.snapshot import Section, lookup, named_entries
from es_exporter.conversion import millis_to_seconds


class JvmMapping(SectionMapping):
    name = "jvm"

    gauges = (
        GaugeSpec("jvm_uptime_seconds", "JVM uptime"),
        GaugeSpec("jvm_mem_heap_max_bytes", "Maximum used memory in heap"),
        GaugeSpec("jvm_mem_heap_used_bytes", "Memory used in heap"),
        GaugeSpec("jvm_mem_heap_used_percent", "Percentage of memory used in heap"),
        GaugeSpec("jvm_mem_nonheap_used_bytes", "Memory used apart from heap"),
        GaugeSpec("jvm_mem_heap_committed_bytes", "Committed bytes in heap"),
        GaugeSpec("jvm_mem_nonheap_committed_bytes", "Committed bytes apart from heap"),
        GaugeSpec("jvm_mem_pool_max_bytes", "Maximum usage of memory pool", ("node", "pool")),
        GaugeSpec("jvm_mem_pool_peak_max_bytes", "Maximum usage peak of memory pool", ("node", "pool")),
        GaugeSpec("jvm_mem_pool_used_bytes", "Used memory in memory pool", ("node", "pool")),
        GaugeSpec("jvm_mem_pool_peak_used_bytes", "Used memory peak in memory pool", ("node", "pool")),
        GaugeSpec("jvm_threads_number", "Number of threads"),
        GaugeSpec("jvm_threads_peak_number", "Peak number of threads"),
        GaugeSpec("jvm_gc_collection_count", "Count of GC collections", ("node", "gc")),
        GaugeSpec("jvm_gc_collection_time_seconds", "Time spent for GC collections", ("node", "gc")),
        GaugeSpec("jvm_bufferpool_number", "Number of buffer pools", ("node", "bufferpool")),
        GaugeSpec(
            "jvm_bufferpool_total_capacity_bytes",
            "Total capacity provided by buffer pools",
            ("node", "bufferpool"),
        ),
        GaugeSpec("jvm_bufferpool_used_bytes", "Used memory in buffer pools", ("node", "bufferpool")),
        GaugeSpec("jvm_classes_loaded_count", "Count of loaded classes"),
        GaugeSpec("jvm_classes_total_loaded_count", "Total count of loaded classes"),
        GaugeSpec("jvm_classes_unloaded_count", "Count of unloaded classes"),
    )

    fields = (
        Field("jvm_uptime_seconds", "uptime_in_millis", millis_to_seconds),
        Field("jvm_mem_heap_max_bytes", "mem.heap_max_in_bytes"),
        Field("jvm_mem_heap_used_bytes", "mem.heap_used_in_bytes"),
        Field("jvm_mem_heap_used_percent", "mem.heap_used_percent"),
        Field("jvm_mem_nonheap_used_bytes", "mem.non_heap_used_in_bytes"),
        Field("jvm_mem_heap_committed_bytes", "mem.heap_committed_in_bytes"),
        Field("jvm_mem_nonheap_committed_bytes", "mem.non_heap_committed_in_bytes"),
        Field("jvm_threads_number", "threads.count"),
        Field("jvm_threads_peak_number", "threads.peak_count"),
        Field("jvm_classes_loaded_count", "classes.current_loaded_count"),
        Field("jvm_classes_total_loaded_count", "classes.total_loaded_count"),
        Field("jvm_classes_unloaded_count", "classes.total_unloaded_count"),
    )

    def update(self, catalog: MetricCatalog, node: str, data: Section) -> None:
        super().update(catalog, node, data)

        for pool, stats in named_entries(data, "mem.pools"):
            set_if_present(catalog, "jvm_mem_pool_max_bytes", lookup(stats, "max_in_bytes"), node, pool)
            set_if_present(catalog, "jvm_mem_pool_peak_max_bytes", lookup(stats, "peak_max_in_bytes"), node, pool)
            set_if_present(catalog, "jvm_mem_pool_used_bytes", lookup(stats, "used_in_bytes"), node, pool)
            set_if_present(catalog, "jvm_mem_pool_peak_used_bytes", lookup(stats, "peak_used_in_bytes"), node, pool)

        for gc, stats in named_entries(data, "gc.collectors"):
            set_if_present(catalog, "jvm_gc_collection_count", lookup(stats, "collection_count"), node, gc)
            set_if_present(
                catalog,
                "jvm_gc_collection_time_seconds",
                millis_to_seconds(lookup(stats, "collection_time_in_millis")),
                node,
                gc,
            )

        for pool, stats in named_entries(data, "buffer_pools"):
            set_if_present(catalog, "jvm_bufferpool_number", lookup(stats, "count"), node, pool)
            set_if_present(
                catalog, "jvm_bufferpool_total_capacity_bytes", lookup(stats, "total_capacity_in_bytes"), node, pool
            )
            set_if_present(catalog, "jvm_bufferpool_used_bytes", lookup(stats, "used_in_bytes"), node, pool)


__all__ = ["JvmMapping"]
