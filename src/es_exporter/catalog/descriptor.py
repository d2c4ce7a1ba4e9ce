"""Catalog – MetricKind and MetricDescriptor."""
from __future__ import annotations

import dataclasses
import enum
import re

_METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")
_LABEL_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

CLUSTER_LABEL = "cluster"


class MetricKind(str, enum.Enum):
    GAUGE = "gauge"
    TIMER = "summary"


@dataclasses.dataclass(frozen=True)
class MetricDescriptor:
    """Name, help text, label names and kind of one registered metric.

    ``label_names`` fixes the arity of every series of this metric; the
    (name, label_names, kind) triple is the descriptor's *signature*.
    """

    name: str
    help: str
    label_names: tuple[str, ...] = ()
    kind: MetricKind = MetricKind.GAUGE

    def __post_init__(self) -> None:
        if not _METRIC_NAME_RE.match(self.name):
            raise ValueError(f"Invalid metric name: {self.name!r}")
        for label in self.label_names:
            if not _LABEL_NAME_RE.match(label) or label.startswith("__"):
                raise ValueError(f"Invalid label name {label!r} for metric {self.name!r}")
        if len(set(self.label_names)) != len(self.label_names):
            raise ValueError(f"Duplicate label names for metric {self.name!r}: {self.label_names!r}")

    @property
    def arity(self) -> int:
        return len(self.label_names)

    def signature(self) -> str:
        labels = ", ".join(self.label_names)
        return f"{self.kind.name.lower()}({labels})"

    def same_signature(self, other: MetricDescriptor) -> bool:
        return self.kind is other.kind and self.label_names == other.label_names


__all__ = ["CLUSTER_LABEL", "MetricDescriptor", "MetricKind"]
