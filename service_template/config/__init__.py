"""Configuration package for environment-derived runtime settings."""

from .settings import AppSettings, SettingsLoadError, config_load_settings, config_resolve_env

__all__ = ["AppSettings", "SettingsLoadError", "config_load_settings", "config_resolve_env"]
