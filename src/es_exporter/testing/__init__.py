"""Testing utilities for code built on es_exporter."""
