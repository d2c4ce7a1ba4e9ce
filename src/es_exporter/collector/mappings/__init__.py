"""Mappings – snapshot sections to catalog gauges."""
from __future__ import annotations

from es_exporter.collector.mappings.base import Field, GaugeSpec, SectionMapping, set_if_present
from es_exporter.collector.mappings.cluster import ClusterHealthMapping
from es_exporter.collector.mappings.fs import FsMapping
from es_exporter.collector.mappings.indices import IndicesMapping
from es_exporter.collector.mappings.jvm import JvmMapping
from es_exporter.collector.mappings.node import (
    HttpMapping,
    OsMapping,
    ProcessMapping,
    ScriptMapping,
    TransportMapping,
)
from es_exporter.collector.mappings.pools import CircuitBreakerMapping, ThreadPoolMapping
from es_exporter.collector.mappings.tasks import TasksMapping
from es_exporter.tasks import TaskDurationTracker


def default_mappings(tracker: TaskDurationTracker) -> list[SectionMapping]:
    """Every section mapping, in the order a cycle applies them."""
    return [
        ClusterHealthMapping(),
        JvmMapping(),
        IndicesMapping(),
        TransportMapping(),
        HttpMapping(),
        ScriptMapping(),
        ProcessMapping(),
        OsMapping(),
        CircuitBreakerMapping(),
        ThreadPoolMapping(),
        TasksMapping(tracker),
        FsMapping(),
    ]


__all__ = [
    "CircuitBreakerMapping",
    "ClusterHealthMapping",
    "Field",
    "FsMapping",
    "GaugeSpec",
    "HttpMapping",
    "IndicesMapping",
    "JvmMapping",
    "OsMapping",
    "ProcessMapping",
    "ScriptMapping",
    "SectionMapping",
    "TasksMapping",
    "ThreadPoolMapping",
    "TransportMapping",
    "default_mappings",
    "set_if_present",
]
