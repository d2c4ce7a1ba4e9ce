"""FastAPI adapter – Prometheus metrics router."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from prometheus_client import CONTENT_TYPE_LATEST

if TYPE_CHECKING:
    from es_exporter.catalog import MetricCatalog
    from es_exporter.collector import CollectorPipeline


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'es-exporter[fastapi]' to use the FastAPI adapter"
        ) from exc


def MetricsRouter(
    catalog: MetricCatalog,
    pipeline: CollectorPipeline | None = None,
    path: str = "/metrics",
    tags: list[str] | None = None,
) -> Any:
    """Return a router serving *catalog* in the Prometheus text format.

    Parameters
    ----------
    catalog:
        Catalog to render.
    pipeline:
        When given, one collection cycle runs before every render so that
        each scrape sees fresh values. Cycle failures surface as HTTP 500.
    path:
        Route path.
    tags:
        OpenAPI tags for the generated route.
    """
    _require_fastapi()
    from fastapi import APIRouter
    from fastapi.responses import Response

    router = APIRouter(tags=tags or ["ops"])

    @router.get(path, response_class=Response)
    async def metrics() -> Any:
        if pipeline is not None:
            await pipeline.run_once()
        return Response(content=catalog.render(), media_type=CONTENT_TYPE_LATEST)

    return router


__all__ = ["MetricsRouter"]
