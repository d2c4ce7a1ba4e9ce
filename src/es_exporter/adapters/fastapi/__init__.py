"""FastAPI adapter – metrics exposition router."""
from es_exporter.adapters.fastapi.routers import MetricsRouter

__all__ = ["MetricsRouter"]
