"""Mappings – node-level indices statistics."""
from __future__ import annotations

from es_exporter.collector.mappings.base import Field, GaugeSpec, SectionMapping
from es_exporter.conversion import bool_to_gauge, millis_to_seconds

_NO_HELP = "No Help provided for the moment"

_SEGMENT_MEMORY = (
    ("all", "memory_in_bytes"),
    ("bitset", "fixed_bit_set_memory_in_bytes"),
    ("docvalues", "doc_values_memory_in_bytes"),
    ("indexwriter_max", "index_writer_max_memory_in_bytes"),
    ("indexwriter", "index_writer_memory_in_bytes"),
    ("norms", "norms_memory_in_bytes"),
    ("storefields", "stored_fields_memory_in_bytes"),
    ("terms", "terms_memory_in_bytes"),
    ("termvectors", "term_vectors_memory_in_bytes"),
    ("versionmap", "version_map_memory_in_bytes"),
)


class IndicesMapping(SectionMapping):
    name = "indices"

    gauges = (
        GaugeSpec("indices_doc_count", "Total number of documents"),
        GaugeSpec("indices_doc_deleted_count", "Number of deleted documents"),
        GaugeSpec("indices_store_size_bytes", _NO_HELP),
        GaugeSpec("indices_store_throttle_time_seconds", _NO_HELP),
        GaugeSpec("indices_indexing_delete_count", "Count of documents deleted"),
        GaugeSpec("indices_indexing_delete_current_number", "Current rate of documents deleted"),
        GaugeSpec("indices_indexing_delete_time_seconds", "Time spent while deleting documents"),
        GaugeSpec("indices_indexing_index_count", "Count of documents indexed"),
        GaugeSpec("indices_indexing_index_current_number", "Current rate of documents indexed"),
        GaugeSpec("indices_indexing_index_failed_count", "Count of failed to index documents"),
        GaugeSpec("indices_indexing_index_time_seconds", "Time spent while indexing documents"),
        GaugeSpec("indices_indexing_noop_update_count", "Count of noop document updates"),
        GaugeSpec("indices_indexing_is_throttled_bool", "Is indexing throttling ?"),
        GaugeSpec("indices_indexing_throttle_time_seconds", "Time spent while throttling"),
        GaugeSpec("indices_get_count", "Count of get commands"),
        GaugeSpec("indices_get_time_seconds", "Time spent while get commands"),
        GaugeSpec("indices_get_exists_count", "Count of existing documents when get command"),
        GaugeSpec("indices_get_exists_time_seconds", "Time spent while existing documents get command"),
        GaugeSpec("indices_get_missing_count", "Count of missing documents when get command"),
        GaugeSpec("indices_get_missing_time_seconds", "Time spent while missing documents get command"),
        GaugeSpec("indices_search_open_contexts_number", "Number of search open contexts"),
        GaugeSpec("indices_search_fetch_count", "Count of search fetches"),
        GaugeSpec("indices_search_fetch_current_number", "Current rate of search fetches"),
        GaugeSpec("indices_search_fetch_time_seconds", "Time spent while search fetches"),
        GaugeSpec("indices_search_query_count", "Count of search queries"),
        GaugeSpec("indices_search_query_current_number", "Current rate of search queries"),
        GaugeSpec("indices_search_query_time_seconds", "Time spent while search queries"),
        GaugeSpec("indices_search_scroll_count", "Count of search scrolls"),
        GaugeSpec("indices_search_scroll_current_number", "Current rate of search scrolls"),
        GaugeSpec("indices_search_scroll_time_seconds", "Time spent while search scrolls"),
        GaugeSpec("indices_merges_current_number", "Current rate of merges"),
        GaugeSpec("indices_merges_current_docs_number", "Current rate of documents merged"),
        GaugeSpec("indices_merges_current_size_bytes", "Current rate of bytes merged"),
        GaugeSpec("indices_merges_total_number", "Count of merges"),
        GaugeSpec("indices_merges_total_time_seconds", "Time spent while merging"),
        GaugeSpec("indices_merges_total_docs_count", "Count of documents merged"),
        GaugeSpec("indices_merges_total_size_bytes", "Count of bytes of merged documents"),
        GaugeSpec("indices_merges_total_stopped_time_seconds", _NO_HELP),
        GaugeSpec("indices_merges_total_throttled_time_seconds", "Time spent while merging when throttling"),
        GaugeSpec("indices_merges_total_auto_throttle_bytes", "Bytes merged while throttling"),
        GaugeSpec("indices_refresh_total_count", "Count of refreshes"),
        GaugeSpec("indices_refresh_total_time_seconds", "Time spent while refreshes"),
        GaugeSpec("indices_flush_total_count", "Count of flushes"),
        GaugeSpec("indices_flush_total_time_seconds", "Total time spent while flushes"),
        GaugeSpec("indices_querycache_cache_count", _NO_HELP),
        GaugeSpec("indices_querycache_cache_size_bytes", "Query cache size"),
        GaugeSpec("indices_querycache_evictions_count", "Count of evictions in query cache"),
        GaugeSpec("indices_querycache_hit_count", "Count of hits in query cache"),
        GaugeSpec("indices_querycache_memory_size_bytes", "Memory usage of query cache"),
        GaugeSpec("indices_querycache_miss_count", "Count of misses in query cache"),
        GaugeSpec("indices_querycache_total_count", _NO_HELP),
        GaugeSpec("indices_fielddata_memory_size_bytes", "Memory usage of field date cache"),
        GaugeSpec("indices_fielddata_evictions_count", "Count of evictions in field data cache"),
        GaugeSpec("indices_percolate_count", "Count of percolates"),
        GaugeSpec("indices_percolate_current_number", "Rate of percolates"),
        GaugeSpec("indices_percolate_memory_size_bytes", "Percolate memory size"),
        GaugeSpec("indices_percolate_queries_count", "Count of queries percolated"),
        GaugeSpec("indices_percolate_time_seconds", "Time spent while percolating"),
        GaugeSpec("indices_completion_size_bytes", _NO_HELP),
        GaugeSpec("indices_segments_number", "Current number of segments"),
        GaugeSpec("indices_segments_memory_bytes", "Memory used by segments", ("node", "type")),
        GaugeSpec("indices_suggest_current_number", "Current rate of suggests"),
        GaugeSpec("indices_suggest_count", "Count of suggests"),
        GaugeSpec("indices_suggest_time_seconds", "Time spent while making suggests"),
        GaugeSpec("indices_requestcache_memory_size_bytes", "Memory used for request cache"),
        GaugeSpec("indices_requestcache_hit_count", "Number of hits in request cache"),
        GaugeSpec("indices_requestcache_miss_count", "Number of misses in request cache"),
        GaugeSpec("indices_requestcache_evictions_count", "Number of evictions in request cache"),
        GaugeSpec("indices_recovery_current_number", "Current number of recoveries", ("node", "type")),
        GaugeSpec("indices_recovery_throttle_time_seconds", "Time spent while throttling recoveries"),
    )

    fields = (
        Field("indices_doc_count", "docs.count"),
        Field("indices_doc_deleted_count", "docs.deleted"),
        Field("indices_store_size_bytes", "store.size_in_bytes"),
        Field("indices_store_throttle_time_seconds", "store.throttle_time_in_millis", millis_to_seconds),
        Field("indices_indexing_delete_count", "indexing.delete_total"),
        Field("indices_indexing_delete_current_number", "indexing.delete_current"),
        Field("indices_indexing_delete_time_seconds", "indexing.delete_time_in_millis", millis_to_seconds),
        Field("indices_indexing_index_count", "indexing.index_total"),
        Field("indices_indexing_index_current_number", "indexing.index_current"),
        Field("indices_indexing_index_failed_count", "indexing.index_failed"),
        Field("indices_indexing_index_time_seconds", "indexing.index_time_in_millis", millis_to_seconds),
        Field("indices_indexing_noop_update_count", "indexing.noop_update_total"),
        Field("indices_indexing_is_throttled_bool", "indexing.is_throttled", bool_to_gauge),
        Field("indices_indexing_throttle_time_seconds", "indexing.throttle_time_in_millis", millis_to_seconds),
        Field("indices_get_count", "get.total"),
        Field("indices_get_time_seconds", "get.time_in_millis", millis_to_seconds),
        Field("indices_get_exists_count", "get.exists_total"),
        Field("indices_get_exists_time_seconds", "get.exists_time_in_millis", millis_to_seconds),
        Field("indices_get_missing_count", "get.missing_total"),
        Field("indices_get_missing_time_seconds", "get.missing_time_in_millis", millis_to_seconds),
        Field("indices_search_open_contexts_number", "search.open_contexts"),
        Field("indices_search_fetch_count", "search.fetch_total"),
        Field("indices_search_fetch_current_number", "search.fetch_current"),
        Field("indices_search_fetch_time_seconds", "search.fetch_time_in_millis", millis_to_seconds),
        Field("indices_search_query_count", "search.query_total"),
        Field("indices_search_query_current_number", "search.query_current"),
        Field("indices_search_query_time_seconds", "search.query_time_in_millis", millis_to_seconds),
        Field("indices_search_scroll_count", "search.scroll_total"),
        Field("indices_search_scroll_current_number", "search.scroll_current"),
        Field("indices_search_scroll_time_seconds", "search.scroll_time_in_millis", millis_to_seconds),
        Field("indices_merges_current_number", "merges.current"),
        Field("indices_merges_current_docs_number", "merges.current_docs"),
        Field("indices_merges_current_size_bytes", "merges.current_size_in_bytes"),
        Field("indices_merges_total_number", "merges.total"),
        Field("indices_merges_total_time_seconds", "merges.total_time_in_millis", millis_to_seconds),
        Field("indices_merges_total_docs_count", "merges.total_docs"),
        Field("indices_merges_total_size_bytes", "merges.total_size_in_bytes"),
        Field(
            "indices_merges_total_stopped_time_seconds",
            "merges.total_stopped_time_in_millis",
            millis_to_seconds,
        ),
        Field(
            "indices_merges_total_throttled_time_seconds",
            "merges.total_throttled_time_in_millis",
            millis_to_seconds,
        ),
        Field("indices_merges_total_auto_throttle_bytes", "merges.total_auto_throttle_in_bytes"),
        Field("indices_refresh_total_count", "refresh.total"),
        Field("indices_refresh_total_time_seconds", "refresh.total_time_in_millis", millis_to_seconds),
        Field("indices_flush_total_count", "flush.total"),
        Field("indices_flush_total_time_seconds", "flush.total_time_in_millis", millis_to_seconds),
        Field("indices_querycache_cache_count", "query_cache.cache_count"),
        Field("indices_querycache_cache_size_bytes", "query_cache.cache_size"),
        Field("indices_querycache_evictions_count", "query_cache.evictions"),
        Field("indices_querycache_hit_count", "query_cache.hit_count"),
        Field("indices_querycache_memory_size_bytes", "query_cache.memory_size_in_bytes"),
        Field("indices_querycache_miss_count", "query_cache.miss_count"),
        Field("indices_querycache_total_count", "query_cache.total_count"),
        Field("indices_fielddata_memory_size_bytes", "fielddata.memory_size_in_bytes"),
        Field("indices_fielddata_evictions_count", "fielddata.evictions"),
        Field("indices_percolate_count", "percolate.total"),
        Field("indices_percolate_current_number", "percolate.current"),
        Field("indices_percolate_memory_size_bytes", "percolate.memory_size_in_bytes"),
        Field("indices_percolate_queries_count", "percolate.queries"),
        Field("indices_percolate_time_seconds", "percolate.time_in_millis", millis_to_seconds),
        Field("indices_completion_size_bytes", "completion.size_in_bytes"),
        Field("indices_segments_number", "segments.count"),
        *(
            Field("indices_segments_memory_bytes", f"segments.{key}", labels=(kind,))
            for kind, key in _SEGMENT_MEMORY
        ),
        Field("indices_suggest_current_number", "search.suggest_current"),
        Field("indices_suggest_count", "search.suggest_total"),
        Field("indices_suggest_time_seconds", "search.suggest_time_in_millis", millis_to_seconds),
        Field("indices_requestcache_memory_size_bytes", "request_cache.memory_size_in_bytes"),
        Field("indices_requestcache_hit_count", "request_cache.hit_count"),
        Field("indices_requestcache_miss_count", "request_cache.miss_count"),
        Field("indices_requestcache_evictions_count", "request_cache.evictions"),
        Field("indices_recovery_current_number", "recovery.current_as_source", labels=("source",)),
        Field("indices_recovery_current_number", "recovery.current_as_target", labels=("target",)),
        Field("indices_recovery_throttle_time_seconds", "recovery.throttle_time_in_millis", millis_to_seconds),
    )


__all__ = ["IndicesMapping"]
