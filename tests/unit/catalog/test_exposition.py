"""Unit tests for Prometheus text rendering of the catalog."""

from __future__ import annotations

import pytest

from es_exporter.catalog import CLUSTER_LABEL, MetricCatalog
from es_exporter.kernel.time import ManualClock


def _text(catalog: MetricCatalog) -> str:
    return catalog.render().decode("utf-8")


class TestRenderGauges:
    def test_help_and_type_headers(self) -> None:
        catalog = MetricCatalog()
        catalog.register_gauge("cluster_status", "Cluster status")
        text = _text(catalog)
        assert "# HELP cluster_status Cluster status" in text
        assert "# TYPE cluster_status gauge" in text

    def test_unwritten_series_are_absent(self) -> None:
        catalog = MetricCatalog()
        catalog.register_gauge("x", "h", "node")
        text = _text(catalog)
        assert "# TYPE x gauge" in text
        assert "x{" not in text

    def test_written_series(self) -> None:
        catalog = MetricCatalog()
        catalog.register_gauge("jvm_threads_number", "Number of threads", "node")
        catalog.set_gauge("jvm_threads_number", 42, "n1")
        assert 'jvm_threads_number{node="n1"} 42.0' in _text(catalog)

    def test_prefix_and_cluster_label(self) -> None:
        catalog = MetricCatalog(prefix="es_", cluster="prod")
        catalog.register_gauge("tasks_duration_max", "Longest task duration", "action")
        catalog.set_gauge("tasks_duration_max", 2, "indices:data/write/bulk")
        text = _text(catalog)
        assert "# HELP es_tasks_duration_max Longest task duration" in text
        assert 'es_tasks_duration_max{cluster="prod",action="indices:data/write/bulk"} 2.0' in text

    def test_rendered_cluster_label_is_the_reserved_name(self) -> None:
        catalog = MetricCatalog(cluster="prod")
        catalog.register_gauge("x", "h")
        catalog.set_gauge("x", 1)
        assert f'x{{{CLUSTER_LABEL}="prod"}} 1.0' in _text(catalog)
        with pytest.raises(ValueError):
            catalog.register_gauge("y", "h", CLUSTER_LABEL)

    def test_large_values_use_exponent_notation(self) -> None:
        catalog = MetricCatalog()
        catalog.register_gauge("fs_total_total_bytes", "Total disk space", "node")
        catalog.set_gauge("fs_total_total_bytes", 123_456_789_012, "n")
        assert 'fs_total_total_bytes{node="n"} 1.23456789012e+11' in _text(catalog)

    def test_cluster_label_comes_first(self) -> None:
        catalog = MetricCatalog(cluster="prod")
        catalog.register_gauge("x", "h", "node")
        catalog.set_gauge("x", 1, "n1")
        assert 'x{cluster="prod",node="n1"} 1.0' in _text(catalog)

    def test_label_values_are_escaped(self) -> None:
        catalog = MetricCatalog()
        catalog.register_gauge("fs_path_total_bytes", "Total disk space", "path")
        catalog.set_gauge("fs_path_total_bytes", 1, 'C:\\data "x"')
        assert r'fs_path_total_bytes{path="C:\\data \"x\""} 1.0' in _text(catalog)

    def test_families_follow_registration_order(self) -> None:
        catalog = MetricCatalog()
        catalog.register_gauge("zzz", "h")
        catalog.register_gauge("aaa", "h")
        text = _text(catalog)
        assert text.index("# HELP zzz") < text.index("# HELP aaa")


class TestRenderTimers:
    def test_summary_count_and_sum(self) -> None:
        clock = ManualClock()
        catalog = MetricCatalog(prefix="es_", clock=clock)
        catalog.register_summary_timer("metrics_generate_time_seconds", "Time spent while generating metrics", "node")
        for _ in range(3):
            with catalog.start_summary_timer("metrics_generate_time_seconds", "n1"):
                clock.advance(0.5)

        text = _text(catalog)
        assert "# TYPE es_metrics_generate_time_seconds summary" in text
        assert 'es_metrics_generate_time_seconds_count{node="n1"} 3.0' in text
        assert 'es_metrics_generate_time_seconds_sum{node="n1"} 1.5' in text

    def test_no_created_samples(self) -> None:
        catalog = MetricCatalog()
        catalog.register_summary_timer("t", "h")
        catalog.start_summary_timer("t").observe_duration()
        assert "_created" not in _text(catalog)
