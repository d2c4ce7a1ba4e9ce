"""Mappings – cluster health."""
from __future__ import annotations

from typing import Any

from es_exporter.collector.mappings.base import Field, GaugeSpec, SectionMapping
from es_exporter.collector.snapshot import StatsSnapshot
from es_exporter.conversion import bool_to_gauge, cluster_status_value, millis_to_seconds


class ClusterHealthMapping(SectionMapping):
    name = "cluster_health"
    node_scoped = False

    gauges = (
        GaugeSpec("cluster_status", "Cluster status", ()),
        GaugeSpec("cluster_nodes_number", "Number of nodes in the cluster", ()),
        GaugeSpec("cluster_datanodes_number", "Number of data nodes in the cluster", ()),
        GaugeSpec("cluster_shards_active_percent", "Percent of active shards", ()),
        GaugeSpec("cluster_shards_number", "Number of shards", ("type",)),
        GaugeSpec("cluster_pending_tasks_number", "Number of pending tasks", ()),
        GaugeSpec("cluster_task_max_waiting_time_seconds", "Max waiting time for tasks", ()),
        GaugeSpec("cluster_is_timedout_bool", "Is the cluster timed out ?", ()),
        GaugeSpec("cluster_inflight_fetch_number", "Number of in flight fetches", ()),
    )

    fields = (
        Field("cluster_status", "status", cluster_status_value),
        Field("cluster_nodes_number", "number_of_nodes"),
        Field("cluster_datanodes_number", "number_of_data_nodes"),
        Field("cluster_shards_active_percent", "active_shards_percent_as_number"),
        Field("cluster_shards_number", "active_shards", labels=("active",)),
        Field("cluster_shards_number", "active_primary_shards", labels=("active_primary",)),
        Field("cluster_shards_number", "delayed_unassigned_shards", labels=("delayed_unassigned",)),
        Field("cluster_shards_number", "initializing_shards", labels=("initializing",)),
        Field("cluster_shards_number", "relocating_shards", labels=("relocating",)),
        Field("cluster_shards_number", "unassigned_shards", labels=("unassigned",)),
        Field("cluster_pending_tasks_number", "number_of_pending_tasks"),
        Field("cluster_task_max_waiting_time_seconds", "task_max_waiting_in_queue_millis", millis_to_seconds),
        Field("cluster_is_timedout_bool", "timed_out", bool_to_gauge),
        Field("cluster_inflight_fetch_number", "number_of_in_flight_fetch"),
    )

    def select(self, snapshot: StatsSnapshot) -> Any:
        return snapshot.cluster_health


__all__ = ["ClusterHealthMapping"]
