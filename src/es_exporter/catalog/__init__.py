"""Catalog – metric descriptors, labeled series and Prometheus rendering."""
from prometheus_client import CONTENT_TYPE_LATEST

from es_exporter.catalog.catalog import CLUSTER_LABEL, MetricCatalog
from es_exporter.catalog.descriptor import MetricDescriptor, MetricKind
from es_exporter.catalog.series import TimerStats
from es_exporter.catalog.timer import TimerHandle

__all__ = [
    "CLUSTER_LABEL",
    "CONTENT_TYPE_LATEST",
    "MetricCatalog",
    "MetricDescriptor",
    "MetricKind",
    "TimerHandle",
    "TimerStats",
]
