"""Config settings – 12-factor env-based configuration."""
from es_exporter.config.settings.base import ExporterSettings, Settings
from es_exporter.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ExporterSettings", "Settings", "SettingsLoader"]
