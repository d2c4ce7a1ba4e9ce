"""Elasticsearch adapter – REST stat source."""
from es_exporter.adapters.elasticsearch.client import ElasticsearchStatSource

__all__ = ["ElasticsearchStatSource"]
