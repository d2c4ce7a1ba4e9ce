"""Kernel time – Clock port + implementations."""
from es_exporter.kernel.time.clock import Clock, ManualClock, SystemClock

__all__ = ["Clock", "ManualClock", "SystemClock"]
