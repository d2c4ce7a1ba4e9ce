"""Unit tests for exporter bootstrap wiring."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterator

import pytest
import structlog

from es_exporter.bootstrap import build_exporter, configure_logging
from es_exporter.collector import NodeIdentity
from es_exporter.config import ExporterSettings, InvalidSettingValueError
from es_exporter.kernel.errors import CollaboratorFailure
from es_exporter.testing.fakes import FakeStatSource, ManualClock


class _FailingIdentitySource(FakeStatSource):
    async def node_identity(self) -> NodeIdentity:
        raise CollaboratorFailure("node_stats", "connection refused")


class TestBuildExporter:
    def test_wires_identity_into_catalog(self) -> None:
        source = FakeStatSource(
            cluster_health={"status": "green"},
            identity=NodeIdentity(cluster_name="prod", node_name="es-data-0"),
        )

        async def run() -> bytes:
            exporter = await build_exporter(ExporterSettings(), source=source, clock=ManualClock())
            await exporter.pipeline.run_once()
            await exporter.aclose()
            return exporter.catalog.render()

        text = asyncio.run(run()).decode()
        assert 'es_cluster_status{cluster="prod"} 0.0' in text
        assert 'es_metrics_generate_time_seconds_count{cluster="prod",node="es-data-0"} 1.0' in text
        assert source.closed

    def test_without_cluster_label(self) -> None:
        settings = ExporterSettings(cluster_label=False, metric_prefix="")
        exporter = asyncio.run(build_exporter(settings, source=FakeStatSource()))
        assert exporter.catalog.cluster is None
        assert exporter.catalog.prefix == ""
        assert exporter.pipeline.node == "node-1"
        assert exporter.identity.cluster_name == "test-cluster"

    def test_settings_default_to_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ES_EXPORTER_METRIC_PREFIX", "custom_")
        monkeypatch.setenv("ES_EXPORTER_CLUSTER_LABEL", "false")

        exporter = asyncio.run(build_exporter(source=FakeStatSource()))

        assert exporter.settings.metric_prefix == "custom_"
        assert exporter.catalog.prefix == "custom_"
        assert exporter.catalog.cluster is None

    def test_invalid_environment_stops_startup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ES_EXPORTER_REQUEST_TIMEOUT", "0")
        source = FakeStatSource()
        with pytest.raises(InvalidSettingValueError):
            asyncio.run(build_exporter(source=source))
        assert source.calls == []

    def test_identity_failure_propagates(self) -> None:
        with pytest.raises(CollaboratorFailure):
            asyncio.run(build_exporter(ExporterSettings(), source=_FailingIdentitySource()))


class TestMetricsRouter:
    @pytest.mark.parametrize(("refresh", "cycles"), [(True, 1), (False, 0)])
    def test_refresh_on_scrape_setting(self, refresh: bool, cycles: int) -> None:
        from fastapi import FastAPI
        from fastapi.testclient import TestClient

        settings = ExporterSettings(refresh_on_scrape=refresh)
        exporter = asyncio.run(build_exporter(settings, source=FakeStatSource()))
        app = FastAPI()
        app.include_router(exporter.metrics_router())

        resp = TestClient(app).get("/metrics")

        assert resp.status_code == 200
        assert exporter.pipeline.cycles == cycles


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_logging(self) -> Iterator[None]:
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_applies_level(self) -> None:
        configure_logging(ExporterSettings(log_level="WARNING", log_json=False))
        assert logging.getLogger().level == logging.WARNING
