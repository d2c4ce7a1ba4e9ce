"""Observability – the exporter's own logging."""
