"""Collector – snapshot containers and partial-structure lookups."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterator, Mapping

from es_exporter.tasks import TaskInfo

Section = Mapping[str, Any]


@dataclasses.dataclass(frozen=True)
class NodeIdentity:
    cluster_name: str
    node_name: str


@dataclasses.dataclass(frozen=True)
class StatsSnapshot:
    """What one cycle fetched; ``None`` marks an unavailable snapshot."""

    cluster_health: Section | None = None
    node_stats: Section | None = None
    tasks: list[TaskInfo] | None = None

    def section(self, name: str) -> Section | None:
        """A top-level node-stats section (``jvm``, ``indices``, …)."""
        if self.node_stats is None:
            return None
        value = self.node_stats.get(name)
        return value if isinstance(value, Mapping) else None

    @property
    def unavailable(self) -> list[str]:
        return [
            name
            for name, value in (
                ("cluster_health", self.cluster_health),
                ("node_stats", self.node_stats),
                ("tasks", self.tasks),
            )
            if value is None
        ]


def lookup(section: Section | None, path: str) -> Any:
    """Follow a dotted *path* through nested mappings.

    Returns ``None`` as soon as a step is missing, null, or not a mapping.
    """
    current: Any = section
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def named_entries(section: Section | None, path: str) -> Iterator[tuple[str, Section]]:
    """Iterate ``(name, entry)`` pairs of a name-keyed sub-mapping such as
    ``jvm.mem.pools`` or ``breakers``."""
    entries = lookup(section, path) if path else section
    if not isinstance(entries, Mapping):
        return
    for name, entry in entries.items():
        if isinstance(entry, Mapping):
            yield str(name), entry


__all__ = ["NodeIdentity", "Section", "StatsSnapshot", "lookup", "named_entries"]
