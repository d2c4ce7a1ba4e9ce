"""Collector – CollectorPipeline, one fetch → map → write cycle.

Each call to :meth:`CollectorPipeline.run_once`:

1. opens the ``metrics_generate_time_seconds{node}`` summary timer;
2. fetches cluster health, the task list and the local node stats;
3. applies every section mapping whose section is present;
4. records the timer observation, whatever happened in between.

An unavailable section is skipped and its series keep their previous values.
Collaborator failures and catalog errors propagate to the caller.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from es_exporter.catalog import MetricCatalog
from es_exporter.collector.mappings import SectionMapping, default_mappings
from es_exporter.collector.snapshot import StatsSnapshot
from es_exporter.collector.sources import StatSource
from es_exporter.kernel.errors import StatSourceUnavailable
from es_exporter.observability.logging import get_logger
from es_exporter.tasks import TaskDurationTracker

T = TypeVar("T")

CYCLE_TIMER_METRIC = "metrics_generate_time_seconds"

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class CycleReport:
    cycle: int
    duration_seconds: float
    updated_sections: tuple[str, ...] = ()
    skipped_sections: tuple[str, ...] = ()


class CollectorPipeline:
    """Runs collection cycles against one :class:`StatSource` and catalog.

    Parameters
    ----------
    source:
        Where the raw statistics come from.
    catalog:
        Destination of every write. Descriptors are registered by the
        constructor (registration is idempotent).
    node:
        Stable node identifier used as the ``node`` label value.
    tracker:
        Task duration tracker; a new one is created when omitted.
    mappings:
        Section mappings to apply, in order. Defaults to
        :func:`~es_exporter.collector.mappings.default_mappings`.
    """

    def __init__(
        self,
        source: StatSource,
        catalog: MetricCatalog,
        node: str,
        *,
        tracker: TaskDurationTracker | None = None,
        mappings: Iterable[SectionMapping] | None = None,
    ) -> None:
        self._source = source
        self._catalog = catalog
        self._node = node
        self._tracker = tracker or TaskDurationTracker(catalog)
        self._mappings = list(mappings) if mappings is not None else default_mappings(self._tracker)
        self._cycle_lock = asyncio.Lock()
        self._cycles = 0
        self.register()

    @property
    def catalog(self) -> MetricCatalog:
        return self._catalog

    @property
    def tracker(self) -> TaskDurationTracker:
        return self._tracker

    @property
    def node(self) -> str:
        return self._node

    @property
    def cycles(self) -> int:
        """Number of cycles started, whether they completed or failed."""
        return self._cycles

    def register(self) -> None:
        self._catalog.register_summary_timer(CYCLE_TIMER_METRIC, "Time spent while generating metrics", "node")
        for mapping in self._mappings:
            mapping.register(self._catalog)

    async def run_once(self) -> CycleReport:
        """Run one collection cycle; overlapping callers wait their turn."""
        async with self._cycle_lock:
            self._cycles += 1
            cycle = self._cycles
            log = _log.bind(cycle=cycle, node=self._node)
            log.debug("collection_cycle_started")

            with self._catalog.start_summary_timer(CYCLE_TIMER_METRIC, self._node) as timer:
                try:
                    snapshot = await self.fetch()
                    updated, skipped = self.apply(snapshot)
                except Exception as exc:
                    log.error("collection_cycle_failed", error=repr(exc))
                    raise

            report = CycleReport(
                cycle=cycle,
                duration_seconds=timer.elapsed or 0.0,
                updated_sections=tuple(updated),
                skipped_sections=tuple(skipped),
            )
            log.debug(
                "collection_cycle_completed",
                duration_seconds=report.duration_seconds,
                skipped=list(report.skipped_sections),
            )
            return report

    async def fetch(self) -> StatsSnapshot:
        cluster_health = await self._fetch("cluster_health", self._source.cluster_health)
        tasks = await self._fetch("tasks", self._source.tasks)
        node_stats = await self._fetch("node_stats", self._source.local_node_stats)
        return StatsSnapshot(cluster_health=cluster_health, node_stats=node_stats, tasks=tasks)

    def apply(self, snapshot: StatsSnapshot) -> tuple[list[str], list[str]]:
        """Write every present section; return ``(updated, skipped)`` names."""
        updated: list[str] = []
        skipped: list[str] = []
        for mapping in self._mappings:
            data: Any = mapping.select(snapshot)
            if data is None:
                skipped.append(mapping.name)
                continue
            mapping.update(self._catalog, self._node, data)
            updated.append(mapping.name)
        return updated, skipped

    async def _fetch(self, section: str, fetch: Callable[[], Awaitable[T]]) -> T | None:
        try:
            return await fetch()
        except StatSourceUnavailable as exc:
            _log.warning("stat_source_unavailable", section=section, reason=exc.message)
            return None


__all__ = ["CYCLE_TIMER_METRIC", "CollectorPipeline", "CycleReport"]
