"""Tasks – TaskDurationTracker.

Reduces the in-flight task list to one ``tasks_duration_max{action}`` gauge
per action. The tracker remembers every action it has ever seen, so an
action that stops running is written as ``0`` on the next cycle instead of
keeping its last duration.

The per-action reduction keeps the parent task with the *smaller* running
time whenever two share an action, whatever the metric name suggests.
"""
from __future__ import annotations

from typing import Iterable

from es_exporter.catalog import MetricCatalog
from es_exporter.conversion import nanos_to_whole_seconds
from es_exporter.tasks.task import TaskInfo

TASKS_DURATION_METRIC = "tasks_duration_max"


class TaskDurationTracker:
    """Stateful reducer from task lists to per-action duration gauges."""

    def __init__(self, catalog: MetricCatalog) -> None:
        self._catalog = catalog
        self._known_actions: set[str] = set()

    @property
    def known_actions(self) -> frozenset[str]:
        """Every action name observed so far (never pruned)."""
        return frozenset(self._known_actions)

    def register(self) -> None:
        self._catalog.register_gauge(TASKS_DURATION_METRIC, "Longest task duration", "action")

    def reduce(self, tasks: Iterable[TaskInfo]) -> dict[str, int]:
        """Write one gauge per known action and return the written seconds."""
        parents = [task for task in tasks if task.is_parent]

        selected: dict[str, TaskInfo | None] = {action: None for action in self._known_actions}
        for task in parents:
            current = selected.get(task.action)
            if current is None or current.running_time_nanos > task.running_time_nanos:
                selected[task.action] = task

        self._known_actions.update(task.action for task in parents)

        written: dict[str, int] = {}
        for action, task in selected.items():
            seconds = nanos_to_whole_seconds(task.running_time_nanos if task else 0)
            self._catalog.set_gauge(TASKS_DURATION_METRIC, seconds, action)
            written[action] = seconds
        return written


__all__ = ["TASKS_DURATION_METRIC", "TaskDurationTracker"]
