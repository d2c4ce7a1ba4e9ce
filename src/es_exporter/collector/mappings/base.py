"""Mappings – declarative section → gauge mapping support.

A :class:`SectionMapping` owns the descriptors of one snapshot section and
knows how to turn that section into ``set_gauge`` calls. Fixed fields are
declared as :class:`Field` rows; sections with name-keyed children (memory
pools, breakers, thread pools, …) extend :meth:`SectionMapping.update`.

A field whose value is missing or null is not written, so the catalog keeps
whatever value it already had for that series.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable, ClassVar

from es_exporter.catalog import MetricCatalog
from es_exporter.collector.snapshot import Section, StatsSnapshot, lookup
from es_exporter.conversion import passthrough

Converter = Callable[[Any], Any]


@dataclasses.dataclass(frozen=True)
class GaugeSpec:
    name: str
    help: str
    labels: tuple[str, ...] = ("node",)


@dataclasses.dataclass(frozen=True)
class Field:
    """One gauge write: ``metric{node, *labels} = convert(section[path])``."""

    metric: str
    path: str
    convert: Converter = passthrough
    labels: tuple[str, ...] = ()


def set_if_present(catalog: MetricCatalog, name: str, value: Any, *label_values: str) -> bool:
    if value is None:
        return False
    catalog.set_gauge(name, value, *label_values)
    return True


class SectionMapping(abc.ABC):
    """Maps one snapshot section onto catalog gauges."""

    name: ClassVar[str]
    gauges: ClassVar[tuple[GaugeSpec, ...]] = ()
    fields: ClassVar[tuple[Field, ...]] = ()
    node_scoped: ClassVar[bool] = True

    def register(self, catalog: MetricCatalog) -> None:
        for gauge in self.gauges:
            catalog.register_gauge(gauge.name, gauge.help, *gauge.labels)

    def select(self, snapshot: StatsSnapshot) -> Any:
        """The part of *snapshot* this mapping consumes, ``None`` if absent."""
        return snapshot.section(self.name)

    def update(self, catalog: MetricCatalog, node: str, data: Section) -> None:
        scope = (node,) if self.node_scoped else ()
        for field in self.fields:
            value = field.convert(lookup(data, field.path))
            set_if_present(catalog, field.metric, value, *scope, *field.labels)


__all__ = ["Converter", "Field", "GaugeSpec", "SectionMapping", "set_if_present"]
