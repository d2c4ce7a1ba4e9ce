"""Bootstrap – wire settings, stat source, catalog and pipeline together."""
from __future__ import annotations

import dataclasses
from typing import Any

from es_exporter.adapters.elasticsearch import ElasticsearchStatSource
from es_exporter.catalog import MetricCatalog
from es_exporter.collector import CollectorPipeline, NodeIdentity, StatSource
from es_exporter.config import EnvSettingsLoader, ExporterSettings
from es_exporter.kernel.time import Clock
from es_exporter.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


@dataclasses.dataclass
class Exporter:
    """Everything one running exporter owns."""

    settings: ExporterSettings
    identity: NodeIdentity
    source: StatSource
    catalog: MetricCatalog
    pipeline: CollectorPipeline

    def metrics_router(self, path: str = "/metrics") -> Any:
        """FastAPI router for this exporter; scrapes trigger a cycle when
        ``settings.refresh_on_scrape`` is set."""
        from es_exporter.adapters.fastapi import MetricsRouter

        pipeline = self.pipeline if self.settings.refresh_on_scrape else None
        return MetricsRouter(self.catalog, pipeline, path=path)

    async def aclose(self) -> None:
        await self.source.aclose()


def configure_logging(settings: ExporterSettings) -> None:
    """Install the structlog pipeline described by *settings*."""
    JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)


async def build_exporter(
    settings: ExporterSettings | None = None,
    source: StatSource | None = None,
    clock: Clock | None = None,
) -> Exporter:
    """Create an :class:`Exporter`.

    Without explicit *settings* they are read from the ``ES_EXPORTER_*``
    environment variables. The node identity is fetched once from *source* (an
    :class:`ElasticsearchStatSource` on ``settings.es_url`` by default); a
    failure there propagates, since nothing can be labeled without it.
    """
    settings = settings or EnvSettingsLoader().load(ExporterSettings)
    if source is None:
        source = ElasticsearchStatSource(settings.es_url, timeout=settings.request_timeout)

    identity = await source.node_identity()
    catalog = MetricCatalog(
        prefix=settings.metric_prefix,
        cluster=identity.cluster_name if settings.cluster_label else None,
        clock=clock,
    )
    pipeline = CollectorPipeline(source, catalog, identity.node_name)
    _log.info(
        "exporter_ready",
        cluster=identity.cluster_name,
        node=identity.node_name,
        metrics=len(catalog.descriptors()),
    )
    return Exporter(
        settings=settings,
        identity=identity,
        source=source,
        catalog=catalog,
        pipeline=pipeline,
    )


__all__ = ["Exporter", "build_exporter", "configure_logging"]
