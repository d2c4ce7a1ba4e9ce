"""Mappings – file system totals and per-path data directories."""
from __future__ import annotations

from collections.abc import Mapping

from es_exporter.catalog import MetricCatalog
from es_exporter.collector.mappings.base import Field, GaugeSpec, SectionMapping, set_if_present
from es_exporter.collector.snapshot import Section, lookup
from es_exporter.conversion import bool_to_gauge

_PATH_LABELS = ("node", "path", "mount", "type")


class FsMapping(SectionMapping):
    name = "fs"

    gauges = (
        GaugeSpec("fs_total_total_bytes", "Total disk space for all mount points"),
        GaugeSpec("fs_total_available_bytes", "Available disk space for all mount points"),
        GaugeSpec("fs_total_free_bytes", "Free disk space for all mountpoints"),
        GaugeSpec("fs_total_is_spinning_bool", "Is it a spinning disk ?"),
        GaugeSpec("fs_path_total_bytes", "Total disk space", _PATH_LABELS),
        GaugeSpec("fs_path_available_bytes", "Available disk space", _PATH_LABELS),
        GaugeSpec("fs_path_free_bytes", "Free disk space", _PATH_LABELS),
        GaugeSpec("fs_path_is_spinning_bool", "Is it a spinning disk ?", _PATH_LABELS),
    )

    fields = (
        Field("fs_total_total_bytes", "total.total_in_bytes"),
        Field("fs_total_available_bytes", "total.available_in_bytes"),
        Field("fs_total_free_bytes", "total.free_in_bytes"),
        Field("fs_total_is_spinning_bool", "total.spins", bool_to_gauge),
    )

    def update(self, catalog: MetricCatalog, node: str, data: Section) -> None:
        super().update(catalog, node, data)

        for entry in data.get("data") or ():
            if not isinstance(entry, Mapping):
                continue
            labels = (
                node,
                str(entry.get("path", "")),
                str(entry.get("mount", "")),
                str(entry.get("type", "")),
            )
            set_if_present(catalog, "fs_path_total_bytes", lookup(entry, "total_in_bytes"), *labels)
            set_if_present(catalog, "fs_path_available_bytes", lookup(entry, "available_in_bytes"), *labels)
            set_if_present(catalog, "fs_path_free_bytes", lookup(entry, "free_in_bytes"), *labels)
            set_if_present(catalog, "fs_path_is_spinning_bool", bool_to_gauge(entry.get("spins")), *labels)


__all__ = ["FsMapping"]
