"""Collector – StatSource port."""
from __future__ import annotations

import abc

from es_exporter.collector.snapshot import NodeIdentity, Section
from es_exporter.tasks import TaskInfo


class StatSource(abc.ABC):
    """Port: supplies raw Elasticsearch statistics.

    Every fetch either returns its snapshot, returns ``None`` / raises
    :class:`~es_exporter.kernel.errors.StatSourceUnavailable` when the data is
    not available this time, or raises
    :class:`~es_exporter.kernel.errors.CollaboratorFailure` when the call
    itself failed.
    """

    @abc.abstractmethod
    async def node_identity(self) -> NodeIdentity: ...

    @abc.abstractmethod
    async def cluster_health(self) -> Section | None: ...

    @abc.abstractmethod
    async def local_node_stats(self) -> Section | None: ...

    @abc.abstractmethod
    async def tasks(self) -> list[TaskInfo] | None: ...

    async def aclose(self) -> None:
        """Release resources held by the source."""


__all__ = ["StatSource"]
