"""Config – 12-factor settings and loaders."""

from es_exporter.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExporterSettings,
    Settings,
    SettingsLoader,
)
from es_exporter.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExporterSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
