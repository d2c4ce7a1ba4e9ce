"""Elasticsearch adapter – ElasticsearchStatSource over httpx."""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from es_exporter.collector.snapshot import NodeIdentity, Section
from es_exporter.collector.sources import StatSource
from es_exporter.kernel.errors import (
    CollaboratorFailure,
    CollaboratorTimeoutError,
    StatSourceUnavailable,
)
from es_exporter.tasks import TaskInfo

CLUSTER_HEALTH_PATH = "/_cluster/health"
LOCAL_NODE_STATS_PATH = "/_nodes/_local/stats"
TASKS_PATH = "/_tasks"

# Statuses meaning "no data this time" rather than "the call failed".
_UNAVAILABLE_STATUSES = frozenset({404, 503})


class ElasticsearchStatSource(StatSource):
    """Reads cluster health, local node stats and tasks from the REST API.

    Usage::

        async with ElasticsearchStatSource("http://localhost:9200") as source:
            identity = await source.node_identity()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:9200",
        timeout: float = 10.0,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> ElasticsearchStatSource:
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def node_identity(self) -> NodeIdentity:
        payload = await self._get_json("node_stats", LOCAL_NODE_STATS_PATH)
        node = _first_node(payload)
        if node is None:
            raise CollaboratorFailure("node_stats", "Local node stats response has no node entry")
        return NodeIdentity(
            cluster_name=str(payload.get("cluster_name", "")),
            node_name=str(node.get("name", "")),
        )

    async def cluster_health(self) -> Section | None:
        return await self._get_json("cluster_health", CLUSTER_HEALTH_PATH)

    async def local_node_stats(self) -> Section | None:
        payload = await self._get_json("node_stats", LOCAL_NODE_STATS_PATH)
        node = _first_node(payload)
        if node is None:
            raise StatSourceUnavailable("node_stats", "Local node stats response has no node entry")
        return {**node, "cluster_name": payload.get("cluster_name")}

    async def tasks(self) -> list[TaskInfo] | None:
        payload = await self._get_json("tasks", TASKS_PATH, params={"detailed": "false"})
        tasks: list[TaskInfo] = []
        for node in (payload.get("nodes") or {}).values():
            for task_id, task in (node.get("tasks") or {}).items():
                tasks.append(TaskInfo.from_api(task_id, task))
        return tasks

    async def _get_json(self, section: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.get(path, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise CollaboratorTimeoutError(section, f"Request timed out: GET {path}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status in _UNAVAILABLE_STATUSES:
                raise StatSourceUnavailable(section, f"HTTP {status} from GET {path}", cause=exc) from exc
            raise CollaboratorFailure(
                section,
                f"HTTP {status} from GET {path}",
                status_code=status,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise CollaboratorFailure(section, str(exc) or type(exc).__name__, cause=exc) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CollaboratorFailure(section, f"Invalid JSON from GET {path}", cause=exc) from exc


def _first_node(payload: Mapping[str, Any]) -> Mapping[str, Any] | None:
    nodes = payload.get("nodes") or {}
    for node in nodes.values():
        return node
    return None


__all__ = ["ElasticsearchStatSource"]
