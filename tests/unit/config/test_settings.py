"""Unit tests for exporter settings and loaders."""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

import pytest

from es_exporter.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExporterSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# ExporterSettings
# ---------------------------------------------------------------------------


class TestExporterSettings:
    def test_defaults(self) -> None:
        settings = ExporterSettings()
        assert settings.es_url == "http://localhost:9200"
        assert settings.request_timeout == 10.0
        assert settings.metric_prefix == "es_"
        assert settings.cluster_label is True
        assert settings.refresh_on_scrape is True
        assert settings.log_level == "INFO"

    def test_empty_prefix_allowed(self) -> None:
        assert ExporterSettings(metric_prefix="").metric_prefix == ""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"es_url": "localhost:9200"},
            {"request_timeout": 0},
            {"metric_prefix": "es-"},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExporterSettings(**kwargs)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ES_EXPORTER_ES_URL", "https://es.internal:9200")
        monkeypatch.setenv("ES_EXPORTER_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("ES_EXPORTER_CLUSTER_LABEL", "false")
        monkeypatch.setenv("ES_EXPORTER_LOG_LEVEL", "debug")

        settings = EnvSettingsLoader().load(ExporterSettings)

        assert settings.es_url == "https://es.internal:9200"
        assert settings.request_timeout == 2.5
        assert settings.cluster_label is False
        assert settings.log_level == "debug"

    def test_unset_variables_keep_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ES_EXPORTER_METRIC_PREFIX", raising=False)
        assert EnvSettingsLoader().load(ExporterSettings).metric_prefix == "es_"

    def test_bad_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ES_EXPORTER_REQUEST_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ExporterSettings)
        assert exc_info.value.setting_name == "ES_EXPORTER_REQUEST_TIMEOUT"

    def test_validation_error_is_not_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ES_EXPORTER_REQUEST_TIMEOUT", "-1")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ExporterSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"
        assert isinstance(exc_info.value, ConfigError)


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # setenv first so teardown removes whatever load_dotenv writes
        monkeypatch.setenv("ES_EXPORTER_METRIC_PREFIX", "unused")
        monkeypatch.delenv("ES_EXPORTER_METRIC_PREFIX")
        env_file = tmp_path / ".env"
        env_file.write_text("ES_EXPORTER_METRIC_PREFIX=elastic_\n")

        settings = DotenvSettingsLoader(str(env_file)).load(ExporterSettings)

        assert settings.metric_prefix == "elastic_"

    def test_environment_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ES_EXPORTER_METRIC_PREFIX", "env_")
        env_file = tmp_path / ".env"
        env_file.write_text("ES_EXPORTER_METRIC_PREFIX=file_\n")

        settings = DotenvSettingsLoader(str(env_file)).load(ExporterSettings)
        assert settings.metric_prefix == "env_"
