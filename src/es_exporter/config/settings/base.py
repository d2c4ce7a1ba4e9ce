"""Config settings – Settings base class and ExporterSettings."""
from __future__ import annotations

import dataclasses
import logging
import re
from typing import ClassVar

from es_exporter.config.validation import InvalidSettingValueError

_PREFIX_RE = re.compile(r"^[a-zA-Z_:]?[a-zA-Z0-9_:]*$")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExporterSettings(Settings):
    """Runtime settings, read from ``ES_EXPORTER_*`` environment variables."""

    _prefix: ClassVar[str] = "ES_EXPORTER"

    es_url: str = "http://localhost:9200"
    request_timeout: float = 10.0
    metric_prefix: str = "es_"
    cluster_label: bool = True
    refresh_on_scrape: bool = True
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.es_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("es_url", self.es_url, "must be an http(s) URL")
        if self.request_timeout <= 0:
            raise InvalidSettingValueError("request_timeout", self.request_timeout, "must be positive")
        if not _PREFIX_RE.match(self.metric_prefix):
            raise InvalidSettingValueError("metric_prefix", self.metric_prefix, "not a valid metric name prefix")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")


__all__ = ["ExporterSettings", "Settings"]
