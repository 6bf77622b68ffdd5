"""Configuration package for runtime settings and startup validation."""

from .settings import SettingsLoadError, SplinterSettings, config_load_settings

__all__ = ["SettingsLoadError", "SplinterSettings", "config_load_settings"]
