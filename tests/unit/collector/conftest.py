"""Shared Elasticsearch payloads for collector tests."""

from __future__ import annotations

from typing import Any

import pytest

from es_exporter.tasks import TaskInfo


def cluster_health_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "cluster_name": "prod",
        "status": "yellow",
        "timed_out": False,
        "number_of_nodes": 3,
        "number_of_data_nodes": 2,
        "active_primary_shards": 10,
        "active_shards": 18,
        "relocating_shards": 0,
        "initializing_shards": 1,
        "unassigned_shards": 2,
        "delayed_unassigned_shards": 1,
        "number_of_pending_tasks": 4,
        "number_of_in_flight_fetch": 0,
        "task_max_waiting_in_queue_millis": 1500,
        "active_shards_percent_as_number": 85.7,
    }
    payload.update(overrides)
    return payload


def node_stats_payload() -> dict[str, Any]:
    return {
        "name": "node-1",
        "cluster_name": "prod",
        "jvm": {
            "uptime_in_millis": 120_500,
            "mem": {
                "heap_used_in_bytes": 512,
                "heap_used_percent": 50,
                "heap_committed_in_bytes": 1024,
                "heap_max_in_bytes": 1024,
                "non_heap_used_in_bytes": 128,
                "non_heap_committed_in_bytes": 256,
                "pools": {
                    "young": {
                        "used_in_bytes": 10,
                        "max_in_bytes": 100,
                        "peak_used_in_bytes": 50,
                        "peak_max_in_bytes": 100,
                    },
                    "old": {
                        "used_in_bytes": 20,
                        "max_in_bytes": 200,
                        "peak_used_in_bytes": 60,
                        "peak_max_in_bytes": 200,
                    },
                },
            },
            "threads": {"count": 42, "peak_count": 50},
            "gc": {
                "collectors": {
                    "young": {"collection_count": 7, "collection_time_in_millis": 250},
                    "old": {"collection_count": 1, "collection_time_in_millis": 1000},
                }
            },
            "buffer_pools": {
                "direct": {"count": 3, "used_in_bytes": 300, "total_capacity_in_bytes": 400},
            },
            "classes": {
                "current_loaded_count": 100,
                "total_loaded_count": 110,
                "total_unloaded_count": 10,
            },
        },
        "indices": {
            "docs": {"count": 1000, "deleted": 5},
            "store": {"size_in_bytes": 4096, "throttle_time_in_millis": 0},
            "indexing": {
                "index_total": 900,
                "index_time_in_millis": 4500,
                "index_current": 0,
                "index_failed": 1,
                "delete_total": 5,
                "delete_time_in_millis": 10,
                "delete_current": 0,
                "noop_update_total": 0,
                "is_throttled": False,
                "throttle_time_in_millis": 0,
            },
            "search": {
                "open_contexts": 0,
                "query_total": 30,
                "query_time_in_millis": 750,
                "query_current": 0,
                "fetch_total": 20,
                "fetch_time_in_millis": 100,
                "fetch_current": 0,
                "scroll_total": 0,
                "scroll_time_in_millis": 0,
                "scroll_current": 0,
                "suggest_total": 2,
                "suggest_time_in_millis": 4,
                "suggest_current": 0,
            },
            "segments": {"count": 12, "memory_in_bytes": 2048, "terms_memory_in_bytes": 1024},
            "recovery": {
                "current_as_source": 1,
                "current_as_target": 0,
                "throttle_time_in_millis": 30,
            },
        },
        "os": {
            "cpu": {"percent": 12, "load_average": {"1m": 0.5, "5m": 0.4, "15m": 0.3}},
            "mem": {"total_in_bytes": 8000, "free_in_bytes": 2000, "used_in_bytes": 6000},
            "swap": {"total_in_bytes": 0, "free_in_bytes": 0, "used_in_bytes": 0},
        },
        "process": {
            "open_file_descriptors": 200,
            "max_file_descriptors": 65535,
            "cpu": {"percent": 3, "total_in_millis": 45_000},
            "mem": {"total_virtual_in_bytes": 123456},
        },
        "thread_pool": {
            "search": {"threads": 4, "queue": 0, "active": 1, "rejected": 0, "largest": 4, "completed": 99},
        },
        "fs": {
            "total": {"total_in_bytes": 1000, "free_in_bytes": 400, "available_in_bytes": 300},
            "data": [
                {
                    "path": "/var/lib/elasticsearch/nodes/0",
                    "mount": "/ (/dev/sda1)",
                    "type": "ext4",
                    "total_in_bytes": 1000,
                    "free_in_bytes": 400,
                    "available_in_bytes": 300,
                    "spins": "true",
                }
            ],
        },
        "transport": {
            "server_open": 13,
            "rx_count": 100,
            "rx_size_in_bytes": 2000,
            "tx_count": 90,
            "tx_size_in_bytes": 1800,
        },
        "http": {"current_open": 2, "total_opened": 17},
        "breakers": {
            "request": {
                "limit_size_in_bytes": 600,
                "estimated_size_in_bytes": 0,
                "overhead": 1.0,
                "tripped": 0,
            },
            "fielddata": {
                "limit_size_in_bytes": 400,
                "estimated_size_in_bytes": 10,
                "overhead": 1.03,
                "tripped": 2,
            },
        },
        "script": {"compilations": 5, "cache_evictions": 0},
    }


def tasks_payload() -> list[TaskInfo]:
    return [
        TaskInfo("node-1:1", "indices:data/write/bulk", running_time_nanos=5_000_000_000),
        TaskInfo("node-1:2", "indices:data/write/bulk", running_time_nanos=2_000_000_000),
        TaskInfo(
            "node-1:3",
            "indices:data/write/bulk[s]",
            running_time_nanos=9_000_000_000,
            parent_task_id="node-1:1",
        ),
    ]


@pytest.fixture()
def cluster_health() -> dict[str, Any]:
    return cluster_health_payload()


@pytest.fixture()
def node_stats() -> dict[str, Any]:
    return node_stats_payload()


@pytest.fixture()
def tasks() -> list[TaskInfo]:
    return tasks_payload()
