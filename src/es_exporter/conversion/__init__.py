"""Conversion – pure unit helpers."""
from es_exporter.conversion.units import (
    bool_to_gauge,
    cluster_status_value,
    millis_to_seconds,
    nanos_to_seconds,
    nanos_to_whole_seconds,
    passthrough,
)

__all__ = [
    "bool_to_gauge",
    "cluster_status_value",
    "millis_to_seconds",
    "nanos_to_seconds",
    "nanos_to_whole_seconds",
    "passthrough",
]
