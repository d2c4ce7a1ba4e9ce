"""Collector – stat-source port, snapshot helpers, mappings and the cycle pipeline."""
from es_exporter.collector.pipeline import CYCLE_TIMER_METRIC, CollectorPipeline, CycleReport
from es_exporter.collector.snapshot import NodeIdentity, StatsSnapshot, lookup, named_entries
from es_exporter.collector.sources import StatSource

__all__ = [
    "CYCLE_TIMER_METRIC",
    "CollectorPipeline",
    "CycleReport",
    "NodeIdentity",
    "StatSource",
    "StatsSnapshot",
    "lookup",
    "named_entries",
]
