"""Testing fakes – in-memory doubles for exporter ports."""
from es_exporter.kernel.time import ManualClock
from es_exporter.testing.fakes.stat_source import FakeStatSource

__all__ = ["FakeStatSource", "ManualClock"]
