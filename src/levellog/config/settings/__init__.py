"""Config settings – environment-based loading of logger settings."""
from levellog.config.settings.base import Settings
from levellog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
