"""
es_exporter – Elasticsearch node statistics as Prometheus metrics.

Import path convention::

    from es_exporter.catalog import MetricCatalog
    from es_exporter.collector import CollectorPipeline
    from es_exporter.tasks import TaskDurationTracker
    from es_exporter.bootstrap import build_exporter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
