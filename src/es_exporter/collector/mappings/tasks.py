"""Mappings – in-flight tasks, delegated to the TaskDurationTracker."""
from __future__ import annotations

from typing import Any

from es_exporter.catalog import MetricCatalog
from es_exporter.collector.mappings.base import SectionMapping
from es_exporter.collector.snapshot import StatsSnapshot
from es_exporter.tasks import TaskDurationTracker


class TasksMapping(SectionMapping):
    name = "tasks"
    node_scoped = False

    def __init__(self, tracker: TaskDurationTracker) -> None:
        self._tracker = tracker

    @property
    def tracker(self) -> TaskDurationTracker:
        return self._tracker

    def register(self, catalog: MetricCatalog) -> None:
        self._tracker.register()

    def select(self, snapshot: StatsSnapshot) -> Any:
        return snapshot.tasks

    def update(self, catalog: MetricCatalog, node: str, data: Any) -> None:
        self._tracker.reduce(data)


__all__ = ["TasksMapping"]
