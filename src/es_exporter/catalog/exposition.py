"""Catalog – Prometheus text exposition via ``prometheus_client``.

The catalog keeps its own series; :class:`CatalogCollector` adapts it to the
``prometheus_client`` custom-collector protocol so that the text encoding
(escaping, number formatting, HELP/TYPE lines) is done by the library.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.metrics_core import GaugeMetricFamily, Metric, SummaryMetricFamily
from prometheus_client.registry import Collector

from es_exporter.catalog.descriptor import CLUSTER_LABEL, MetricKind

if TYPE_CHECKING:
    from es_exporter.catalog.catalog import MetricCatalog


class CatalogCollector(Collector):
    """Yields one metric family per registered descriptor.

    Families are emitted in registration order; descriptors without any
    written series still produce their HELP/TYPE header.
    """

    def __init__(self, catalog: MetricCatalog) -> None:
        self._catalog = catalog

    def collect(self) -> Iterator[Metric]:
        catalog = self._catalog
        const_names: list[str] = []
        const_values: list[str] = []
        if catalog.cluster is not None:
            const_names.append(CLUSTER_LABEL)
            const_values.append(catalog.cluster)

        for descriptor in catalog.descriptors():
            name = catalog.prefix + descriptor.name
            labels = const_names + list(descriptor.label_names)
            series = catalog.series(descriptor.name)
            if descriptor.kind is MetricKind.TIMER:
                summary = SummaryMetricFamily(name, descriptor.help, labels=labels)
                for label_values, stats in series:
                    summary.add_metric(
                        const_values + list(label_values),
                        count_value=stats.count,
                        sum_value=stats.sum,
                    )
                yield summary
            else:
                gauge = GaugeMetricFamily(name, descriptor.help, labels=labels)
                for label_values, value in series:
                    gauge.add_metric(const_values + list(label_values), value)
                yield gauge


def render(registry: CollectorRegistry) -> bytes:
    return generate_latest(registry)


__all__ = ["CatalogCollector", "render"]
