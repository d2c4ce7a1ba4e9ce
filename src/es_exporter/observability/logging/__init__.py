"""Observability – structured logging helpers."""
from es_exporter.observability.logging.factory import JsonLoggerFactory
from es_exporter.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
